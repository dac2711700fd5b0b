"""
Ternary product terms for Quine-McCluskey minimization.

A term is represented by its pattern string, MSB first:
- '0': variable must be 0 (complemented literal)
- '1': variable must be 1 (plain literal)
- '-': variable does not matter

For 3 variables (A, B, C), pattern "1-0" is the product AC'.
"""

from dataclasses import dataclass, field

DONT_CARE = '-'


@dataclass(frozen=True)
class Term:
    """
    An implicant together with the input minterms it was built from.

    Two terms are equal when their patterns are equal; the minterm set
    never takes part in comparison or hashing.
    """

    pattern: str
    minterms: frozenset[int] = field(default_factory=frozenset, compare=False)

    @classmethod
    def from_minterm(cls, minterm: int, n_vars: int) -> "Term":
        """Build the seed term for a single minterm."""
        return cls(format(minterm, f"0{n_vars}b"), frozenset([minterm]))

    @property
    def num_vars(self) -> int:
        return len(self.pattern)

    @property
    def num_literals(self) -> int:
        """Count the determinate positions (literals) in this term."""
        return self.num_vars - self.pattern.count(DONT_CARE)

    def covers(self, minterm: int) -> bool:
        """Check if the pattern matches a minterm's bits."""
        bits = format(minterm, f"0{self.num_vars}b")
        if len(bits) != self.num_vars:
            return False
        return all(p == DONT_CARE or p == b for p, b in zip(self.pattern, bits))

    def can_combine_with(self, other: "Term") -> bool:
        """
        Check if two terms differ in exactly one determinate position.

        A position where only one side is '-' disqualifies the pair, and
        identical patterns never combine.
        """
        if len(self.pattern) != len(other.pattern):
            return False

        diff = 0
        for a, b in zip(self.pattern, other.pattern):
            if a == b:
                continue
            if a == DONT_CARE or b == DONT_CARE:
                return False
            diff += 1
            if diff > 1:
                return False

        return diff == 1

    def combine_with(self, other: "Term") -> "Term":
        """Merge with a combinable term, placing '-' at the differing bit."""
        if not self.can_combine_with(other):
            raise ValueError(f"Cannot combine {self.pattern} with {other.pattern}")

        pattern = "".join(
            a if a == b else DONT_CARE
            for a, b in zip(self.pattern, other.pattern)
        )
        return Term(pattern, self.minterms | other.minterms)

    def to_literal_expression(self, var_names: list[str] = None) -> str:
        """Convert to a product term string, e.g. "1-0" -> "AC'"."""
        if var_names is None:
            var_names = [chr(ord('A') + i) for i in range(self.num_vars)]

        literals = []
        for i, bit in enumerate(self.pattern):
            if bit == DONT_CARE:
                continue
            literals.append(var_names[i] if bit == '1' else f"{var_names[i]}'")

        return "".join(literals)

    def __repr__(self):
        return f"Term({self.pattern} -> {sorted(self.minterms)})"

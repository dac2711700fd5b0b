"""
Single-output Boolean function minimizer.

Runs Quine-McCluskey to get prime implicants, keeps the essential ones,
and covers the rest of the minterms with Petrick's method (or MaxSAT).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .term import Term
from .quine_mccluskey import (
    variable_count,
    seed_terms,
    find_prime_implicants,
    find_essential_prime_implicants,
    uncovered_minterms,
    non_essential_prime_implicants,
    print_prime_implicants,
)
from .petrick import petrick_cover
from .maxsat import maxsat_cover
from .expression import build_sop

METHODS = ("petrick", "maxsat")


@dataclass
class SimplificationResult:
    """Result of minimizing one function."""

    minterms: list[int]
    n_vars: int
    cover: list[Term]
    method: str
    prime_implicants: list[Term] = field(default_factory=list)
    essential_implicants: list[Term] = field(default_factory=list)
    remaining_minterms: list[int] = field(default_factory=list)

    @property
    def expression(self) -> str:
        return build_sop(self.cover)

    @property
    def num_literals(self) -> int:
        """Total literals over all products of the cover."""
        return sum(t.num_literals for t in self.cover)


class Simplifier(ABC):
    """Interface for minimizers turning minterms into a list of terms."""

    @abstractmethod
    def simplify(self, minterms: list[int]) -> list[Term]:
        ...


class QuineMcCluskeySimplifier(Simplifier):
    """
    Quine-McCluskey minimizer with an exact covering step.

    Args:
        method: "petrick" for Petrick's method, "maxsat" for RC2 MaxSAT
        absorb: Prune superset products during Petrick expansion
        verbose: Print progress for each phase
    """

    def __init__(self, method: str = "petrick", absorb: bool = True, verbose: bool = False):
        if method not in METHODS:
            raise ValueError(f"Unknown cover method: {method!r} (expected one of {', '.join(METHODS)})")
        self.method = method
        self.absorb = absorb
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def _cover_remaining(self, candidates: list[Term], remaining: list[int]) -> list[Term]:
        if self.method == "maxsat":
            return maxsat_cover(candidates, remaining)
        return petrick_cover(candidates, remaining, absorb=self.absorb)

    def run(self, minterms: list[int]) -> SimplificationResult:
        """
        Run the complete minimization pipeline.

        Args:
            minterms: Non-negative minterm codes where the function is 1

        Returns:
            The cover together with the intermediate implicant sets
        """
        minterms = list(dict.fromkeys(minterms))
        if not minterms:
            return SimplificationResult(minterms=[], n_vars=0, cover=[], method=self.method)

        n_vars = variable_count(minterms)

        self._log("Phase 1: Generating prime implicants...")
        primes = find_prime_implicants(seed_terms(minterms, n_vars))
        self._log(f"  Found {len(primes)} prime implicants over {n_vars} variables")

        self._log("\nPhase 2: Selecting essential prime implicants...")
        essentials = find_essential_prime_implicants(primes, minterms)
        remaining = uncovered_minterms(essentials, minterms)
        self._log(f"  Essential: {len(essentials)}, uncovered minterms: {len(remaining)}")
        if self.verbose:
            print_prime_implicants(primes, essentials)

        cover = {t.pattern: t for t in essentials}
        if remaining:
            self._log(f"\nPhase 3: Covering remaining minterms ({self.method})...")
            candidates = non_essential_prime_implicants(primes, essentials)
            selected = self._cover_remaining(candidates, remaining)
            self._log(f"  Selected {len(selected)} of {len(candidates)} candidates")
            for term in selected:
                cover.setdefault(term.pattern, term)

        return SimplificationResult(
            minterms=minterms,
            n_vars=n_vars,
            cover=[cover[p] for p in sorted(cover)],
            method=self.method,
            prime_implicants=primes,
            essential_implicants=essentials,
            remaining_minterms=remaining,
        )

    def simplify(self, minterms: list[int]) -> list[Term]:
        return self.run(minterms).cover


def simplify(minterms: list[int], method: str = "petrick") -> list[Term]:
    """Minimize a function given by its minterms into a list of terms."""
    return QuineMcCluskeySimplifier(method=method).simplify(minterms)

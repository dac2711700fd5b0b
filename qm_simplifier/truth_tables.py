"""
Truth table helpers for functions given by minterms.

Inputs are numbered MSB first: for 3 variables, A is bit 2, B is bit 1
and C is bit 0, so minterm 5 is A=1, B=0, C=1.
"""

from .quine_mccluskey import variable_count


def variable_names(n_vars: int) -> list[str]:
    """Input variable names (MSB to LSB): A, B, C, ..."""
    return [chr(ord('A') + i) for i in range(n_vars)]


def minterm_to_bits(minterm: int, n_vars: int) -> tuple[int, ...]:
    """Convert a minterm index to its bits, MSB first."""
    return tuple((minterm >> (n_vars - 1 - i)) & 1 for i in range(n_vars))


def bits_to_minterm(bits: tuple[int, ...]) -> int:
    """Convert bits (MSB first) back to a minterm index."""
    minterm = 0
    for bit in bits:
        minterm = (minterm << 1) | (bit & 1)
    return minterm


def print_truth_table(minterms: list[int], n_vars: int = None):
    """Print the complete truth table of the function."""
    if not minterms and n_vars is None:
        print("Empty function (always 0)")
        return

    if n_vars is None:
        n_vars = variable_count(minterms)

    on_set = set(minterms)
    names = variable_names(n_vars)
    width = 8 + 3 * n_vars + 4

    print("Truth Table")
    print("=" * width)
    print(f"{'Row':>5} | " + " ".join(f"{v:>2}" for v in names) + " | F")
    print("-" * width)

    for row in range(1 << n_vars):
        bits = " ".join(f"{b:>2}" for b in minterm_to_bits(row, n_vars))
        print(f"{row:>5} | {bits} | {1 if row in on_set else 0}")

"""
Verification of minimization results.

Ensures a cover evaluates to 1 exactly on the function's minterms, and
that the exact covering step found a cover as small as the MaxSAT optimum.
"""

from itertools import islice

from .term import Term
from .quine_mccluskey import variable_count, non_essential_prime_implicants
from .maxsat import minimum_cover_size
from .simplifier import SimplificationResult
from .truth_tables import minterm_to_bits


def evaluate_sop(terms: list[Term], minterm: int) -> bool:
    """Evaluate a sum-of-products on a specific input (OR of AND terms)."""
    return any(t.covers(minterm) for t in terms)


def covered_rows(term: Term):
    """Yield the rows a term evaluates to 1 on, in ascending order."""
    n = term.num_vars
    free = [n - 1 - i for i, bit in enumerate(term.pattern) if bit == '-']
    base = int(term.pattern.replace('-', '0'), 2) if n else 0

    for combo in range(1 << len(free)):
        row = base
        for j, shift in enumerate(free):
            if (combo >> (len(free) - 1 - j)) & 1:
                row |= 1 << shift
        yield row


def verify_cover(terms: list[Term], minterms: list[int], n_vars: int = None) -> tuple[bool, list[str]]:
    """
    Verify that a cover is 1 on every minterm and 0 everywhere else.

    Only the on-set and the rows each term expands to are visited, never
    the full truth table. A term is expanded to at most one row more than
    the on-set holds, which is enough to hit a wrong row if it has one.

    Args:
        terms: The cover to check
        minterms: The function's on-set
        n_vars: Number of input variables (derived from minterms if omitted)

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    if not minterms:
        if terms:
            return False, [f"Empty function, but cover has {len(terms)} terms"]
        return True, []

    if n_vars is None:
        n_vars = variable_count(minterms)

    expected_on = set(minterms)
    wrong_rows = {}

    for m in expected_on:
        if not evaluate_sop(terms, m):
            wrong_rows[m] = (1, 0)

    for term in terms:
        for row in islice(covered_rows(term), len(expected_on) + 1):
            if row not in expected_on:
                wrong_rows[row] = (0, 1)

    errors = []
    for row in sorted(wrong_rows):
        expected, actual = wrong_rows[row]
        bits = "".join(str(b) for b in minterm_to_bits(row, n_vars))
        errors.append(f"Row {row} ({bits}): expected {expected}, got {actual}")

    return len(errors) == 0, errors


def verify_result(result: SimplificationResult) -> tuple[bool, list[str]]:
    """
    Verify correctness and minimality of a minimization result.

    Minimality is checked on the covering step only: the number of
    implicants chosen beyond the essential ones must equal the MaxSAT
    minimum over the same candidates.
    """
    correct, errors = verify_cover(result.cover, result.minterms, result.n_vars or None)

    if result.remaining_minterms:
        candidates = non_essential_prime_implicants(result.prime_implicants, result.essential_implicants)
        optimum = minimum_cover_size(candidates, result.remaining_minterms)
        chosen = len(result.cover) - len(result.essential_implicants)

        if chosen != optimum:
            errors.append(
                f"Covering step chose {chosen} implicants, minimum is {optimum}"
            )

    return len(errors) == 0, errors


def print_truth_table_comparison(result: SimplificationResult):
    """Print truth table comparing expected vs actual outputs."""
    print("Truth Table Verification")
    print("=" * 40)
    print(f"{'Row':>5} | {'Bits':>8} | Exp | Act | Match")
    print("-" * 40)

    all_match = True
    expected_on = set(result.minterms)

    for row in range(1 << result.n_vars):
        bits = "".join(str(b) for b in minterm_to_bits(row, result.n_vars))
        exp = 1 if row in expected_on else 0
        act = 1 if evaluate_sop(result.cover, row) else 0
        if exp != act:
            all_match = False

        print(f"{row:>5} | {bits:>8} | {exp:>3} | {act:>3} | {'.' if exp == act else 'X'}")

    print("-" * 40)
    print(f"All correct: {all_match}")
    return all_match

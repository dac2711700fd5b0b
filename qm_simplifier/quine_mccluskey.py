"""
Pure Python implementation of the Quine-McCluskey prime implicant steps.

This covers prime implicant generation and essential prime implicant
selection for a single-output function. Covering whatever minterms the
essential implicants leave open is done in petrick.py (or maxsat.py).
"""

from .term import Term


def variable_count(minterms: list[int]) -> int:
    """
    Number of variables for a run: bit length of the largest minterm.

    A lone minterm 0 still needs one variable.
    """
    return max(max(minterms).bit_length(), 1)


def seed_terms(minterms: list[int], n_vars: int) -> list[Term]:
    """Create one single-minterm term per distinct input minterm."""
    return [Term.from_minterm(m, n_vars) for m in dict.fromkeys(minterms)]


def find_prime_implicants(terms: list[Term]) -> list[Term]:
    """
    Combine terms round by round until nothing merges.

    Every term that fails to merge in its round is a prime implicant.
    Each round's terms are visited in pattern order so that the result
    does not depend on input order.

    Args:
        terms: Seed terms, one per minterm

    Returns:
        Prime implicants sorted by pattern, one per distinct pattern
    """
    current = sorted({t.pattern: t for t in terms}.values(), key=lambda t: t.pattern)
    primes: dict[str, Term] = {}

    while current:
        combined: dict[str, Term] = {}
        used = [False] * len(current)

        for i, t1 in enumerate(current):
            for j in range(i + 1, len(current)):
                t2 = current[j]
                if t1.can_combine_with(t2):
                    merged = t1.combine_with(t2)
                    if merged.pattern not in combined:
                        combined[merged.pattern] = merged
                    used[i] = True
                    used[j] = True

        for i, term in enumerate(current):
            if not used[i] and term.pattern not in primes:
                primes[term.pattern] = term

        current = sorted(combined.values(), key=lambda t: t.pattern)

    return [primes[p] for p in sorted(primes)]


def build_coverage_chart(primes: list[Term], minterms: list[int]) -> dict[int, list[Term]]:
    """Map each target minterm to the prime implicants covering it."""
    chart: dict[int, list[Term]] = {m: [] for m in minterms}

    for term in primes:
        for m in sorted(term.minterms):
            if m in chart:
                chart[m].append(term)

    return chart


def find_essential_prime_implicants(primes: list[Term], minterms: list[int]) -> list[Term]:
    """
    Select primes that are the only cover of at least one minterm.

    Returns:
        Essential prime implicants sorted by pattern
    """
    chart = build_coverage_chart(primes, minterms)

    essential: dict[str, Term] = {}
    for covering in chart.values():
        if len(covering) == 1:
            term = covering[0]
            essential.setdefault(term.pattern, term)

    return [essential[p] for p in sorted(essential)]


def uncovered_minterms(essentials: list[Term], minterms: list[int]) -> list[int]:
    """Minterms (in input order) that no essential implicant covers."""
    covered = set()
    for term in essentials:
        covered |= term.minterms

    return [m for m in dict.fromkeys(minterms) if m not in covered]


def non_essential_prime_implicants(primes: list[Term], essentials: list[Term]) -> list[Term]:
    """Primes left as candidates for the exact cover step."""
    essential_patterns = {t.pattern for t in essentials}
    return [t for t in primes if t.pattern not in essential_patterns]


def print_prime_implicants(primes: list[Term], essentials: list[Term] = None):
    """Debug helper to print prime implicants with their minterms."""
    essential_patterns = {t.pattern for t in essentials or []}
    print(f"Prime implicants ({len(primes)}):")
    for p in primes:
        mark = "*" if p.pattern in essential_patterns else " "
        expr = p.to_literal_expression() or "1"
        print(f"  {mark} {p.pattern:10} {expr:12} covers {sorted(p.minterms)}")

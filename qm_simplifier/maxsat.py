"""
Minimum-cardinality covering as weighted MaxSAT.

Formulates the covering problem where:
- Hard clauses: every remaining minterm must be covered
- Soft clauses: every selected implicant costs 1
"""

from pysat.examples.rc2 import RC2
from pysat.formula import WCNF

from .term import Term


def maxsat_cover(candidates: list[Term], remaining: list[int]) -> list[Term]:
    """
    Select the fewest candidates that cover all remaining minterms.

    Among equally small covers the solver's choice is kept, so the result
    can differ from Petrick's pick while having the same size.

    Returns:
        Selected implicants sorted by pattern
    """
    if not remaining:
        return []

    wcnf = WCNF()

    # Variable mapping: candidate index -> SAT variable (1-indexed)
    impl_vars = {i: i + 1 for i in range(len(candidates))}

    for m in dict.fromkeys(remaining):
        covering = [impl_vars[i] for i, t in enumerate(candidates) if m in t.minterms]
        if covering:
            wcnf.append(covering)  # Hard: at least one must be selected
        else:
            raise RuntimeError(f"No candidate implicant covers minterm {m}")

    for i in range(len(candidates)):
        wcnf.append([-impl_vars[i]], weight=1)

    with RC2(wcnf) as solver:
        model = solver.compute()
        if model is None:
            raise RuntimeError("MaxSAT solver found no solution")

        selected = [t for i, t in enumerate(candidates) if impl_vars[i] in model]

    return sorted(selected, key=lambda t: t.pattern)


def minimum_cover_size(candidates: list[Term], remaining: list[int]) -> int:
    """Size of a minimum cover of the remaining minterms."""
    return len(maxsat_cover(candidates, remaining))

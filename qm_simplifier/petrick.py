"""
Petrick's method for covering the minterms left after essential selection.

The remaining minterms give a product of sums: for each minterm, the OR
of the candidate implicants covering it. Multiplying out yields a sum of
products, each product being a set of implicants that covers every
remaining minterm. The product with the fewest implicants wins.
"""

from .term import Term

Product = frozenset[Term]


def _product_key(product: Product) -> tuple[str, ...]:
    return tuple(sorted(t.pattern for t in product))


def build_clauses(candidates: list[Term], remaining: list[int]) -> dict[int, list[Term]]:
    """
    Build the clause (covering candidates) for each remaining minterm.

    Raises:
        RuntimeError: If some minterm has no covering candidate
    """
    clauses = {}
    for m in remaining:
        covering = [t for t in candidates if m in t.minterms]
        if not covering:
            raise RuntimeError(f"No candidate implicant covers minterm {m}")
        clauses[m] = covering
    return clauses


def absorb_products(products: dict[tuple[str, ...], Product]) -> dict[tuple[str, ...], Product]:
    """Drop every product that is a strict superset of another product."""
    kept: dict[tuple[str, ...], Product] = {}

    for key, product in sorted(products.items(), key=lambda kv: (len(kv[1]), kv[0])):
        if any(other < product for other in kept.values()):
            continue
        kept[key] = product

    return kept


def expand_products(clauses: list[list[Term]], absorb: bool = True) -> list[Product]:
    """
    Multiply out a product of sums into its distinct products.

    Adding an implicant already in a product leaves it unchanged, and
    identical products are kept once.

    Args:
        clauses: One list of covering implicants per minterm
        absorb: Remove superset products after each multiplication step

    Returns:
        The distinct products
    """
    if not clauses:
        return []

    expansion: dict[tuple[str, ...], Product] = {}
    for term in clauses[0]:
        product = frozenset([term])
        expansion.setdefault(_product_key(product), product)

    for clause in clauses[1:]:
        next_expansion: dict[tuple[str, ...], Product] = {}
        for product in expansion.values():
            for term in clause:
                extended = product | {term}
                next_expansion.setdefault(_product_key(extended), extended)

        expansion = absorb_products(next_expansion) if absorb else next_expansion

    return list(expansion.values())


def select_minimal_product(products: list[Product]) -> Product:
    """
    Pick a product with the fewest implicants.

    Ties go to the lexicographically smallest sorted pattern tuple.
    """
    return min(products, key=lambda p: (len(p), _product_key(p)))


def petrick_cover(candidates: list[Term], remaining: list[int], absorb: bool = True) -> list[Term]:
    """
    Find a minimum-size set of candidates covering all remaining minterms.

    Args:
        candidates: Non-essential prime implicants
        remaining: Minterms not covered by the essential implicants
        absorb: Prune superset products during expansion

    Returns:
        Selected implicants sorted by pattern
    """
    if not remaining:
        return []

    clauses = build_clauses(candidates, remaining)
    products = expand_products([clauses[m] for m in dict.fromkeys(remaining)], absorb=absorb)
    best = select_minimal_product(products)

    return sorted(best, key=lambda t: t.pattern)

"""Render a cover as a sum-of-products expression string."""

from .term import Term


def build_sop(terms: list[Term], var_names: list[str] = None) -> str:
    """
    Join the product terms of a cover with " + ".

    An empty cover is the constant 0. A cover whose only products have no
    literals (the universal term) is the constant 1.
    """
    if not terms:
        return "0"

    products = [t.to_literal_expression(var_names) for t in terms]
    products = [p for p in products if p]

    return " + ".join(products) if products else "1"

"""Boolean function minimization with Quine-McCluskey and Petrick's method."""

from .term import Term
from .quine_mccluskey import (
    find_prime_implicants,
    find_essential_prime_implicants,
    build_coverage_chart,
)
from .petrick import petrick_cover
from .maxsat import maxsat_cover
from .simplifier import Simplifier, QuineMcCluskeySimplifier, SimplificationResult, simplify
from .expression import build_sop
from .export import to_verilog, to_c_code, to_equations
from .verify import verify_cover, verify_result

__all__ = [
    "Term",
    "find_prime_implicants",
    "find_essential_prime_implicants",
    "build_coverage_chart",
    "petrick_cover",
    "maxsat_cover",
    "Simplifier",
    "QuineMcCluskeySimplifier",
    "SimplificationResult",
    "simplify",
    "build_sop",
    "to_verilog",
    "to_c_code",
    "to_equations",
    "verify_cover",
    "verify_result",
]
__version__ = "0.1.0"

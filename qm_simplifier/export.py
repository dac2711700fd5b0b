"""
Export minimized functions to various formats (equations, Verilog, C).
"""

from .simplifier import SimplificationResult
from .term import Term
from .truth_tables import variable_names

# Widest input the C export can pack into uint64_t
MAX_C_VARS = 64


def identifier_names(n_vars: int) -> list[str]:
    """
    HDL/C identifiers for the inputs, MSB first.

    Letters while they last (A..Z), otherwise the bit index: b27 .. b0.
    """
    if n_vars <= 26:
        return variable_names(n_vars)
    return [f"b{n_vars - 1 - i}" for i in range(n_vars)]


def to_equations(result: SimplificationResult) -> str:
    """
    Export a result as Boolean equations.

    Args:
        result: The minimization result

    Returns:
        Human-readable equations with the implicant breakdown
    """
    essential = {t.pattern for t in result.essential_implicants}

    lines = []
    lines.append(f"Minterms: {', '.join(str(m) for m in result.minterms) or '(none)'}")
    lines.append(f"Variables: {result.n_vars}")
    lines.append(f"Method: {result.method}")
    lines.append(f"Prime implicants: {len(result.prime_implicants)}")
    lines.append(f"Essential implicants: {len(result.essential_implicants)}")
    lines.append("")

    if result.cover:
        lines.append("Selected product terms:")
        for term in result.cover:
            kind = "essential" if term.pattern in essential else "covering"
            expr = term.to_literal_expression() or "1"
            lines.append(f"  {term.pattern:10} {expr:12} ({kind}, minterms {sorted(term.minterms)})")
        lines.append("")

    lines.append(f"F = {result.expression}")

    return "\n".join(lines)


def impl_to_verilog(term: Term) -> str:
    """Convert a term to a Verilog expression."""
    names = identifier_names(term.num_vars)
    literals = [
        names[i] if bit == '1' else f"~{names[i]}"
        for i, bit in enumerate(term.pattern)
        if bit != '-'
    ]
    if not literals:
        return "1'b1"
    if len(literals) == 1:
        return literals[0]
    return "(" + " & ".join(literals) + ")"


def to_verilog(result: SimplificationResult, module_name: str = "qm_function") -> str:
    """
    Export a result to Verilog.

    Args:
        result: The minimization result
        module_name: Name for the Verilog module

    Returns:
        Verilog source code as string
    """
    width = max(result.n_vars, 1)

    lines = []
    lines.append(f"// F = {result.expression}")
    lines.append(f"// Minimized with {len(result.cover)} product terms using {result.method}")
    lines.append("")
    lines.append(f"module {module_name} (")
    lines.append(f"    input  wire [{width - 1}:0] x,  // {identifier_names(width)[0]} = x[{width - 1}] (MSB)")
    lines.append("    output wire       f")
    lines.append(");")
    lines.append("")

    if result.n_vars:
        lines.append("    // Input aliases")
        for i, name in enumerate(identifier_names(result.n_vars)):
            lines.append(f"    wire {name} = x[{result.n_vars - 1 - i}];")
        lines.append("")

    terms = [impl_to_verilog(t) for t in result.cover]
    expr = " | ".join(terms) if terms else "1'b0"
    lines.append(f"    assign f = {expr};")
    lines.append("")
    lines.append("endmodule")

    return "\n".join(lines)


def impl_to_c(term: Term) -> str:
    """Convert a term to a C expression."""
    names = identifier_names(term.num_vars)
    literals = [
        names[i] if bit == '1' else f"n{names[i]}"
        for i, bit in enumerate(term.pattern)
        if bit != '-'
    ]
    if not literals:
        return "1"
    if len(literals) == 1:
        return literals[0]
    return "(" + " & ".join(literals) + ")"


def to_c_code(result: SimplificationResult, func_name: str = "qm_function") -> str:
    """
    Export a result as a C function of the packed input bits.

    Args:
        result: The minimization result
        func_name: Name for the C function

    Returns:
        C source code as string

    Raises:
        ValueError: If the function has more inputs than uint64_t holds
    """
    if result.n_vars > MAX_C_VARS:
        raise ValueError(
            f"C export supports at most {MAX_C_VARS} variables, got {result.n_vars}"
        )

    lines = []
    lines.append("/*")
    lines.append(f" * F = {result.expression}")
    lines.append(f" * Minimized with {len(result.cover)} product terms using {result.method}")
    lines.append(" */")
    lines.append("")
    lines.append("#include <stdint.h>")
    lines.append("")
    lines.append(f"uint8_t {func_name}(uint64_t x) {{")

    if result.n_vars:
        lines.append("    // Extract individual bits")
        names = identifier_names(result.n_vars)
        for i, name in enumerate(names):
            lines.append(f"    uint8_t {name} = (x >> {result.n_vars - 1 - i}) & 1;")
        lines.append("    uint8_t " + ", ".join(f"n{name} = !{name}" for name in names) + ";")
        lines.append("")
    else:
        lines.append("    (void)x;")

    terms = [impl_to_c(t) for t in result.cover]
    expr = " | ".join(terms) if terms else "0"
    lines.append(f"    return {expr};")
    lines.append("}")

    return "\n".join(lines)

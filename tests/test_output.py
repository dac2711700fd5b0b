import re

import pytest

from qm_simplifier import QuineMcCluskeySimplifier, Term, build_sop, simplify
from qm_simplifier.export import to_equations, to_verilog, to_c_code
from qm_simplifier.truth_tables import (
    variable_names,
    minterm_to_bits,
    bits_to_minterm,
    print_truth_table,
)
from qm_simplifier.verify import evaluate_sop, verify_cover, verify_result


def test_build_sop_joins_with_plus():
    assert build_sop([Term("01"), Term("10")]) == "A'B + AB'"


def test_build_sop_empty_is_zero():
    assert build_sop([]) == "0"


def test_build_sop_skips_empty_products():
    assert build_sop([Term("--")]) == "1"
    assert build_sop([Term("--"), Term("1-")]) == "A"


def test_variable_names():
    assert variable_names(4) == ["A", "B", "C", "D"]


def test_bit_conversions():
    assert minterm_to_bits(5, 3) == (1, 0, 1)
    assert minterm_to_bits(5, 4) == (0, 1, 0, 1)
    assert bits_to_minterm((1, 0, 1)) == 5


def test_print_truth_table(capsys):
    print_truth_table([1, 2])
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Truth Table"
    assert lines[2].split() == ["Row", "|", "A", "B", "|", "F"]
    rows = [line.split() for line in lines[4:]]
    assert [r[-1] for r in rows] == ["0", "1", "1", "0"]


def test_evaluate_sop():
    cover = [Term("1-0", frozenset({4, 6}))]
    assert evaluate_sop(cover, 6)
    assert not evaluate_sop(cover, 7)


def test_verify_cover_reports_wrong_rows():
    correct, errors = verify_cover([Term("1-")], [2])
    assert not correct
    assert errors == ["Row 3 (11): expected 0, got 1"]


def test_verify_cover_empty_function():
    assert verify_cover([], []) == (True, [])


def test_verify_result_passes_for_minimizer_output():
    result = QuineMcCluskeySimplifier().run([0, 1, 2, 5, 6, 7, 15])
    assert verify_result(result) == (True, [])


def test_verify_result_detects_oversized_cover():
    result = QuineMcCluskeySimplifier().run([0, 1, 2, 5, 6, 7])
    result.cover = result.cover + [p for p in result.prime_implicants if p not in result.cover][:1]

    correct, errors = verify_result(result)
    assert not correct
    assert errors == ["Covering step chose 4 implicants, minimum is 3"]


def test_to_equations():
    text = to_equations(QuineMcCluskeySimplifier().run([0, 1, 3, 7]))
    assert "Essential implicants: 2" in text
    assert text.splitlines()[-1] == "F = BC + A'B'"


def test_to_verilog():
    text = to_verilog(QuineMcCluskeySimplifier().run([0, 1, 3, 7]))
    assert "module qm_function (" in text
    assert "    wire A = x[2];" in text
    assert "    assign f = (B & C) | (~A & ~B);" in text


def test_to_verilog_empty_function():
    text = to_verilog(QuineMcCluskeySimplifier().run([]))
    assert "    assign f = 1'b0;" in text


def test_to_c_code():
    text = to_c_code(QuineMcCluskeySimplifier().run([0, 2, 4, 6]), func_name="f")
    assert "uint8_t f(uint64_t x) {" in text
    assert "    uint8_t C = (x >> 0) & 1;" in text
    assert "    return nC;" in text


def test_verify_cover_reports_missing_minterm():
    correct, errors = verify_cover([Term("00", frozenset({0}))], [0, 3])
    assert not correct
    assert errors == ["Row 3 (11): expected 1, got 0"]


def test_verify_cover_large_minterm_is_fast():
    assert verify_cover(simplify([10**9]), [10**9]) == (True, [])


def test_verify_cover_wide_wrong_term_stops_early():
    correct, errors = verify_cover([Term("-" * 40)], [0], n_vars=40)
    assert not correct
    assert errors == ["Row 1 (" + "0" * 39 + "1): expected 0, got 1"]


def test_to_verilog_up_to_26_inputs_uses_letters():
    text = to_verilog(QuineMcCluskeySimplifier().run([2**25]))
    assert "    wire A = x[25];" in text
    assert "    wire Z = x[0];" in text


def test_to_verilog_wide_function_uses_bit_index_names():
    text = to_verilog(QuineMcCluskeySimplifier().run([2**27]))
    aliases = [line for line in text.splitlines() if line.startswith("    wire ")]

    assert len(aliases) == 28
    assert all(re.fullmatch(r"    wire b\d+ = x\[\d+\];", line) for line in aliases)
    assert "    wire b27 = x[27];" in aliases
    assert "    assign f = (b27 & ~b26 & " in text


def test_to_c_code_wide_function_uses_bit_index_names():
    text = to_c_code(QuineMcCluskeySimplifier().run([2**27]))
    assert "    uint8_t b27 = (x >> 27) & 1;" in text
    assert "    uint8_t b0 = (x >> 0) & 1;" in text
    assert "    return (b27 & nb26 & " in text
    assert "[" not in text.split("{", 1)[1]


def test_to_c_code_rejects_more_than_64_inputs():
    with pytest.raises(ValueError, match="at most 64 variables"):
        to_c_code(QuineMcCluskeySimplifier().run([2**64]))

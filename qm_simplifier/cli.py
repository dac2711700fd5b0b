"""Command-line interface for Boolean function minimization."""

import argparse
import sys

from .simplifier import QuineMcCluskeySimplifier, METHODS
from .truth_tables import print_truth_table
from .verify import verify_result, print_truth_table_comparison
from .export import to_verilog, to_c_code, to_equations


def parse_minterms(tokens: list[str]) -> list[int]:
    """
    Parse minterm tokens separated by whitespace or commas.

    Raises:
        ValueError: If there are no tokens or a token is not a
            non-negative integer
    """
    parts = " ".join(tokens).replace(",", " ").split()
    if not parts:
        raise ValueError("The input is empty!")

    minterms = []
    for token in parts:
        if not token.isdecimal():
            raise ValueError("Please enter only positive integers!")
        minterms.append(int(token))

    return minterms


def main(argv: list[str] = None):
    parser = argparse.ArgumentParser(
        description="Minimize a Boolean function given by its minterms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  qm-simplify 0 2 4 6                 Minimize F = sum(0, 2, 4, 6)
  qm-simplify 1,3,5,7 --verify        Minimize and check the cover
  qm-simplify 0 1 2 5 --method maxsat Cover with MaxSAT instead of Petrick
  qm-simplify 1 2 7 --truth-table     Show the truth table
  qm-simplify 1 2 7 --format verilog  Output as Verilog module
  qm-simplify                         Read minterms from standard input
        """,
    )

    parser.add_argument(
        "minterms",
        nargs="*",
        help="Minterms where the function is 1 (read from stdin if omitted)",
    )
    parser.add_argument(
        "--method",
        choices=list(METHODS),
        default="petrick",
        help="Covering method for non-essential implicants (default: petrick)",
    )
    parser.add_argument(
        "--no-absorb",
        action="store_true",
        help="Disable superset pruning during Petrick expansion",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "equations", "verilog", "c"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--truth-table",
        action="store_true",
        help="Print all 2**n truth table rows of the function and exit",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the cover against the minterms and the MaxSAT optimum "
             "(with -v also prints all 2**n truth table rows)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    tokens = args.minterms
    if not tokens:
        if args.format == "text":
            print("Enter the minterms with a space:")
        tokens = [sys.stdin.readline()]

    try:
        minterms = parse_minterms(tokens)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    if args.truth_table:
        print_truth_table(minterms)
        return 0

    # Progress output only makes sense for plain text
    verbose = args.verbose and args.format == "text"

    simplifier = QuineMcCluskeySimplifier(
        method=args.method,
        absorb=not args.no_absorb,
        verbose=verbose,
    )

    try:
        result = simplifier.run(minterms)

        if args.format == "verilog":
            print(to_verilog(result))
        elif args.format == "c":
            print(to_c_code(result))
        elif args.format == "equations":
            print(to_equations(result))
        else:
            if verbose:
                print()
            print("Simplified expression:")
            print(result.expression)

        if args.verify:
            if verbose:
                print()
                print_truth_table_comparison(result)
            correct, errors = verify_result(result)
            if correct:
                print("Verification PASSED", file=sys.stderr)
            else:
                print("Verification FAILED:", file=sys.stderr)
                for err in errors:
                    print(f"  {err}", file=sys.stderr)
                return 1

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

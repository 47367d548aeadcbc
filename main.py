"""
PDA Validator: command-line entry point

Checks input strings against a pushdown automaton written as transition
rules, one per line:

    (q0,a,Z) -> (q0,AZ)
    (q0,b,A) -> (q0,ε)
    (q0,ε,Z) -> (qf,ε)

Modes:
- demo: run the bundled example automata
- check: test one string (--input) and optionally render the diagram
- batch: test every line of --inputs-file and save JSON results
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from pdavalidator import (
    validate,
    evaluate_strings,
    build_transition_diagram,
    render_transition_diagram
)

BALANCED_RULES = """(q0,a,Z) -> (q0,AZ)
(q0,a,A) -> (q0,AA)
(q0,b,A) -> (q1,ε)
(q1,b,A) -> (q1,ε)
(q1,ε,Z) -> (qf,ε)"""


def read_rules(rules: str = None, rules_file: str = None) -> str:
    """
    Get the rule text from the command line or a file.

    Line terminators at the end of a file are dropped; any other blank
    line is kept and will fail the parse.
    """
    if rules_file:
        with open(rules_file, encoding='utf-8') as f:
            return f.read().rstrip('\r\n')
    if rules is None:
        raise ValueError("Provide --rules or --rules-file")
    return rules.replace('\\n', '\n')


def demo_validation_pipeline():
    """
    Run the example automaton on a few strings.
    """
    print("="*70)
    print(" DEMO: a^n b^n")
    print("="*70)
    print(f"\nRules:\n{BALANCED_RULES}\n")

    for test_string in ["ab", "aabb", "aab", "abb", "ba"]:
        result = validate(BALANCED_RULES, test_string)
        status = "✓" if result.accepted else "✗"
        print(f"{status} {result.message}")

    print("\n" + "="*70)
    print(" DEMO: malformed definition")
    print("="*70)
    result = validate("(q0,a,Z) -> q0,AZ)", "a")
    print(f"\n{result.message}")


def check_string(rule_text: str,
                 test_string: str,
                 output_dir: str = None,
                 verbose: bool = False) -> bool:
    """
    Check one string and optionally render the transition diagram.

    Returns:
        False if the definition could not be checked
    """
    result = validate(rule_text, test_string, verbose=verbose)
    print(result.message)

    if output_dir and result.transitions:
        diagram = build_transition_diagram(result.transitions)
        path = render_transition_diagram(diagram, output_dir=output_dir,
                                         title=result.message)
        print(f"✓ Diagram saved to: {path}")

    return result.ok


def check_batch(rule_text: str,
                inputs_file: str,
                output_file: str = "pda_results.json"):
    """
    Check every line of ``inputs_file`` (an empty line is the empty string).
    """
    with open(inputs_file, encoding='utf-8') as f:
        strings = f.read().splitlines()

    evaluate_strings(rule_text, strings, output_file=output_file, verbose=True)


def main():
    """
    Main entry point for the PDA validator.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="PDA Validator: check strings against a pushdown automaton"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["demo", "check", "batch"],
        default="demo",
        help="Mode to run: demo (bundled examples), check (one string), or batch (strings from a file)"
    )
    parser.add_argument("--rules", type=str, default=None,
                       help="Rule text; separate rules with newlines or a literal \\n")
    parser.add_argument("--rules-file", type=str, default=None,
                       help="File with one rule per line")
    parser.add_argument("--input", type=str, default="",
                       help="String to test in check mode")
    parser.add_argument("--inputs-file", type=str, default=None,
                       help="File with one test string per line (batch mode)")
    parser.add_argument("--output-dir", type=str, default=None,
                       help="Render the transition diagram into this directory")
    parser.add_argument("--eval-output", type=str, default="pda_results.json",
                       help="Output file for batch results")
    parser.add_argument("--verbose", action="store_true",
                       help="Print parsed rules and the simulation trace")

    args = parser.parse_args()

    try:
        if args.mode == "demo":
            demo_validation_pipeline()

        elif args.mode == "check":
            rule_text = read_rules(args.rules, args.rules_file)
            if not check_string(rule_text, args.input, args.output_dir, args.verbose):
                sys.exit(1)

        elif args.mode == "batch":
            if not args.inputs_file:
                parser.error("batch mode requires --inputs-file")
            rule_text = read_rules(args.rules, args.rules_file)
            check_batch(rule_text, args.inputs_file, args.eval_output)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        sys.exit(0)
    except Exception as e:
        print(f"\n\n✗ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

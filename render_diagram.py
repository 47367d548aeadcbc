"""
Render the transition diagram of a PDA definition.

Usage:
    python render_diagram.py --rules-file rules.txt --output-dir diagrams
    python render_diagram.py --demo
"""

import sys
import os
import argparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from pdavalidator import (
    ParseError,
    DiagramRenderer,
    build_transition_diagram,
    parse_language_definition
)
from main import BALANCED_RULES, read_rules


def main():
    parser = argparse.ArgumentParser(
        description="Render a PDA transition diagram"
    )
    parser.add_argument(
        "--rules",
        type=str,
        default=None,
        help="Rule text; separate rules with newlines or a literal \\n"
    )
    parser.add_argument(
        "--rules-file",
        type=str,
        default=None,
        help="File with one rule per line"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="diagram_output",
        help="Directory to save the diagram"
    )
    parser.add_argument(
        "--filename",
        type=str,
        default="pda_diagram.png",
        help="Image file name"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Render the bundled a^n b^n automaton"
    )

    args = parser.parse_args()

    if args.demo:
        rule_text = BALANCED_RULES
    elif args.rules or args.rules_file:
        rule_text = read_rules(args.rules, args.rules_file)
    else:
        print("Error: Must provide --rules, --rules-file or use --demo flag")
        parser.print_help()
        sys.exit(1)

    try:
        transitions = parse_language_definition(rule_text, verbose=True)
    except ParseError as e:
        print(f"Error: {e}")
        sys.exit(1)

    diagram = build_transition_diagram(transitions)
    unplaced = diagram.get_unplaced_states()
    if unplaced:
        print(f"⚠ States without fixed coordinates, placed on grid: {', '.join(unplaced)}")

    renderer = DiagramRenderer(output_dir=args.output_dir)
    path = renderer.render(diagram, filename=args.filename)

    print(f"\n{'='*70}")
    print(f" ✓ Diagram saved to: {path}")
    print(f"{'='*70}\n")


if __name__ == "__main__":
    main()

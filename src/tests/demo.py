"""
Demo script walking through the PDA validator components.

Run from the repository root:
    python src/tests/demo.py
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pdavalidator import (
    ParseError,
    PDASimulator,
    build_transition_diagram,
    parse_language_definition,
    validate
)

RULES = """(q0,a,Z) -> (q0,AZ)
(q0,a,A) -> (q0,AA)
(q0,b,A) -> (q1,ε)
(q1,b,A) -> (q1,ε)
(q1,ε,Z) -> (qf,ε)"""


def demo_parser():
    """Demonstrate the rule parser."""
    print("\n" + "="*70)
    print(" DEMO 1: RULE PARSER")
    print("="*70)

    transitions = parse_language_definition(RULES, verbose=True)

    print(f"\n{'─'*70}")
    print("Malformed definition (blank line between rules):")
    try:
        parse_language_definition("(q0,a,Z) -> (q0,AZ)\n\n(q0,ε,Z) -> (qf,ε)", verbose=True)
    except ParseError as e:
        print(f"  Error: {e}")

    print("\n✓ Parser working correctly!")
    return transitions


def demo_simulator(transitions):
    """Demonstrate the simulator trace."""
    print("\n" + "="*70)
    print(" DEMO 2: PDA SIMULATOR")
    print("="*70)

    simulator = PDASimulator(transitions)
    for test_string in ["aabb", "ba"]:
        print(f"\n{'─'*70}")
        print(f"Input: \"{test_string}\"")
        print(f"{'─'*70}")
        result = simulator.run(test_string)
        for step in result.steps:
            print(f"  {step}")
        print(f"  Verdict: {'ACCEPTED' if result else 'REJECTED'} ({result.reason})")

    print("\n✓ Simulator working correctly!")


def demo_integration():
    """Demonstrate the full request pipeline."""
    print("\n" + "="*70)
    print(" DEMO 3: FULL INTEGRATION TEST")
    print("="*70)

    test_cases = [
        {"input": "ab", "expected": True},
        {"input": "aaabbb", "expected": True},
        {"input": "ba", "expected": False},
        {"input": "", "expected": False},
    ]

    results = []
    for test in test_cases:
        result = validate(RULES, test["input"])
        status = "✓ PASS" if result.accepted == test["expected"] else "✗ FAIL"
        print(f"{status}: {result.message}")
        results.append(result.accepted == test["expected"])

    diagram = build_transition_diagram(parse_language_definition(RULES))
    print(f"\nDiagram: {len(diagram.get_all_states())} states, "
          f"{len(diagram.get_all_transitions())} transitions")
    for state, (x, y) in diagram.get_state_positions().items():
        print(f"  {state}: ({x}, {y})")

    if all(results):
        print("\n" + "="*70)
        print(" ✓ ALL TESTS PASSED!")
        print("="*70)
    else:
        print("\n" + "="*70)
        print(" ⚠ Some tests failed.")
        print("="*70)


def main():
    """Run all demos."""
    print("="*70)
    print(" PDA VALIDATOR DEMONSTRATION")
    print("="*70)

    try:
        transitions = demo_parser()
        demo_simulator(transitions)
        demo_integration()

        print("\n" + "="*70)
        print(" 🎉 DEMO COMPLETE!")
        print("="*70)

    except KeyboardInterrupt:
        print("\n\nDemo interrupted.")
        sys.exit(0)
    except Exception as e:
        print(f"\n\n❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Batch Evaluation

Checks many input strings against one language definition and summarizes
the verdicts. The definition is parsed once; every string gets its own
simulation run.
"""

import json
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from .errors import SimulationError
from .parser import parse_language_definition
from .simulator import PDASimulator


class BatchEvaluator:
    """
    Evaluates a list of strings against one PDA.
    """

    def __init__(self, rule_text: str):
        """
        Args:
            rule_text: Language definition, one rule per line

        Raises:
            ParseError: If the definition is malformed
        """
        self.rule_text = rule_text
        self.transitions = parse_language_definition(rule_text)
        self.simulator = PDASimulator(self.transitions)
        self.results: List[Dict] = []

    def evaluate_string(self, input_string: str) -> Dict:
        """
        Simulate one string.

        Returns:
            Dictionary with the string, verdict, final state and any error
        """
        try:
            result = self.simulator.run(input_string)
        except SimulationError as e:
            return {
                'input': input_string,
                'accepted': False,
                'error': str(e),
            }

        return {
            'input': input_string,
            'accepted': result.accepted,
            'final_state': result.state,
            'steps': len(result.steps),
            'reason': result.reason,
        }

    def evaluate(self, strings: Sequence[str], show_progress: bool = True) -> Dict:
        """
        Evaluate all strings.

        Args:
            strings: Input strings to test
            show_progress: Show a tqdm progress bar

        Returns:
            Summary with per-string results and counts
        """
        self.results = []
        for input_string in tqdm(strings, desc="Simulating", disable=not show_progress):
            self.results.append(self.evaluate_string(input_string))

        return self.summary()

    def summary(self) -> Dict:
        total = len(self.results)
        errors = sum(1 for r in self.results if 'error' in r)
        accepted = sum(1 for r in self.results if r['accepted'])

        return {
            'rules': [record.to_dict() for record in self.transitions],
            'total': total,
            'accepted': accepted,
            'rejected': total - accepted - errors,
            'errors': errors,
            'acceptance_rate': (accepted / total * 100) if total > 0 else 0.0,
            'results': self.results,
        }

    def save_results(self, output_file: str):
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(self.summary(), f, indent=2, ensure_ascii=False)


def evaluate_strings(rule_text: str,
                     strings: Sequence[str],
                     output_file: Optional[str] = None,
                     verbose: bool = False) -> Dict:
    """
    Evaluate many strings against one language definition.

    Args:
        rule_text: Language definition
        strings: Strings to test
        output_file: Optional JSON path for the results
        verbose: Print a summary table

    Returns:
        Summary dictionary (see BatchEvaluator.summary)
    """
    evaluator = BatchEvaluator(rule_text)
    summary = evaluator.evaluate(strings, show_progress=verbose)

    if output_file:
        evaluator.save_results(output_file)

    if verbose:
        print(f"\n{'='*60}")
        print("BATCH RESULTS")
        print(f"{'='*60}")
        for r in summary['results']:
            if 'error' in r:
                status = "✗ ERROR   "
            elif r['accepted']:
                status = "✓ ACCEPTED"
            else:
                status = "✗ REJECTED"
            print(f"{status}: \"{r['input']}\"")
        print(f"\nAccepted: {summary['accepted']}/{summary['total']} "
              f"({summary['acceptance_rate']:.1f}%)")
        if output_file:
            print(f"Results saved to: {output_file}")
        print(f"{'='*60}\n")

    return summary

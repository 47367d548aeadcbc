"""
Validation Pipeline

One isolated parse → simulate cycle per request. The parsed transition
list is forwarded unmodified so the caller can hand it to a diagram
renderer.
"""

from typing import Dict, List, Optional

from .errors import ParseError, SimulationError
from .parser import parse_language_definition
from .simulator import PDASimulator, SimulationResult
from .transitions import TransitionRecord


class ValidationRequest:
    """The rule text and the string to test, as gathered from a form."""

    def __init__(self, rule_text: str, test_string: str):
        self.rule_text = rule_text
        self.test_string = test_string


class ValidationResult:
    """
    Response for one request: either a verdict or an error.

    ``transitions`` is empty when parsing failed.
    """

    def __init__(self,
                 test_string: str,
                 accepted: Optional[bool] = None,
                 error: Optional[str] = None,
                 transitions: Optional[List[TransitionRecord]] = None,
                 simulation: Optional[SimulationResult] = None):
        self.test_string = test_string
        self.accepted = accepted
        self.error = error
        self.transitions = transitions or []
        self.simulation = simulation

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error
        verdict = "ACCEPTED" if self.accepted else "REJECTED"
        return f'The string "{self.test_string}" is {verdict} by the PDA.'

    def to_dict(self) -> Dict:
        if self.error is not None:
            return {"error": self.error}
        return {"accepted": self.accepted, "message": self.message}


def handle_request(request: ValidationRequest, verbose: bool = False) -> ValidationResult:
    """
    Parse the rules and simulate the test string.

    Parse and simulation errors are reported in the result rather than
    raised; a missing transition is a normal rejection, not an error.
    """
    try:
        transitions = parse_language_definition(request.rule_text, verbose=verbose)
    except ParseError as e:
        return ValidationResult(request.test_string, error=f"Error: {e}")

    try:
        simulation = PDASimulator(transitions).run(request.test_string)
    except SimulationError as e:
        return ValidationResult(request.test_string, error=f"Error: {e}",
                                transitions=transitions)

    result = ValidationResult(request.test_string,
                              accepted=simulation.accepted,
                              transitions=transitions,
                              simulation=simulation)

    if verbose:
        for step in simulation.steps:
            print(f"  {step}")
        status = "✓" if simulation.accepted else "✗"
        print(f"{status} {result.message}")

    return result


def validate(rule_text: str, test_string: str, verbose: bool = False) -> ValidationResult:
    """
    Check ``test_string`` against the PDA described by ``rule_text``.

    Args:
        rule_text: Language definition, one rule per line
        test_string: String to test
        verbose: Print the parsed rules and the simulation trace

    Returns:
        ValidationResult; ``to_dict()`` gives the form response
    """
    return handle_request(ValidationRequest(rule_text, test_string), verbose=verbose)

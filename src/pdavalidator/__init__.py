"""
PDA Validator: pushdown automaton definition language and simulator

Parses transition rules written as

    (state,input,stackTop) -> (newState,newStackTop)

and decides whether an input string is accepted. Every automaton starts in
state q0 with Z on the stack; simulation follows the first matching rule and
accepts when a rule pops Z on ε from the final state.
"""

from .errors import PDAError, ParseError, SimulationError
from .transitions import (
    EPSILON,
    START_STATE,
    BOTTOM_MARKER,
    TransitionRecord
)
from .parser import RuleParser, parse_language_definition, INVALID_RULE_MESSAGE
from .simulator import (
    PDASimulator,
    SimulationResult,
    SimulationStep,
    accepts,
    simulate_pda
)
from .validator import (
    ValidationRequest,
    ValidationResult,
    handle_request,
    validate
)
from .diagram import (
    STATE_COORDINATES,
    TransitionDiagram,
    build_transition_diagram
)
from .evaluator import BatchEvaluator, evaluate_strings
from .visualizer import DiagramRenderer, render_transition_diagram

__version__ = "1.0.0"

__all__ = [
    "PDAError",
    "ParseError",
    "SimulationError",
    "EPSILON",
    "START_STATE",
    "BOTTOM_MARKER",
    "TransitionRecord",
    "RuleParser",
    "parse_language_definition",
    "INVALID_RULE_MESSAGE",
    "PDASimulator",
    "SimulationResult",
    "SimulationStep",
    "accepts",
    "simulate_pda",
    "ValidationRequest",
    "ValidationResult",
    "handle_request",
    "validate",
    "STATE_COORDINATES",
    "TransitionDiagram",
    "build_transition_diagram",
    "BatchEvaluator",
    "evaluate_strings",
    "DiagramRenderer",
    "render_transition_diagram",
]

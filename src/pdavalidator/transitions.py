"""
Transition Records

The atomic unit of a PDA definition: one rule mapping
(state, input symbol, stack top) to (new state, stack top replacement).
"""

from dataclasses import dataclass
from typing import Dict, List

EPSILON = "ε"
START_STATE = "q0"
BOTTOM_MARKER = "Z"


@dataclass(frozen=True)
class TransitionRecord:
    """
    A single rule ``(state,input,stackTop) -> (newState,newStackTop)``.

    ``input`` is either one literal symbol or EPSILON. ``new_stack_top`` is
    either EPSILON (pop only) or a string whose first character ends up on
    top of the stack.
    """
    state: str
    input: str
    stack_top: str
    new_state: str
    new_stack_top: str

    @property
    def is_epsilon_input(self) -> bool:
        return self.input == EPSILON

    @property
    def pops_only(self) -> bool:
        return self.new_stack_top == EPSILON

    def matches(self, state: str, symbol: str, top: str) -> bool:
        """
        Check whether this rule may fire in the given configuration.

        Args:
            state: Current state label
            symbol: Current input character
            top: Symbol on top of the stack

        Returns:
            True if state and stack top match exactly and the input is
            either the same symbol or EPSILON
        """
        return (
            self.state == state
            and (self.input == symbol or self.is_epsilon_input)
            and self.stack_top == top
        )

    def is_acceptance_rule(self, state: str) -> bool:
        """Whether this rule pops the bottom marker on epsilon from ``state``."""
        return (
            self.state == state
            and self.is_epsilon_input
            and self.stack_top == BOTTOM_MARKER
            and self.pops_only
        )

    def push_symbols(self) -> List[str]:
        """
        Symbols to push after popping the top, in push order.

        The replacement string is read top-first, so it is pushed reversed.
        """
        if self.pops_only:
            return []
        return list(reversed(self.new_stack_top))

    def label(self) -> str:
        return f"{self.input}, {self.stack_top} -> {self.new_stack_top}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "state": self.state,
            "input": self.input,
            "stackTop": self.stack_top,
            "newState": self.new_state,
            "newStackTop": self.new_stack_top,
        }

    def __str__(self):
        return (f"({self.state},{self.input},{self.stack_top}) -> "
                f"({self.new_state},{self.new_stack_top})")

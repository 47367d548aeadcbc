"""
PDA Simulator

Replays an input string against an ordered transition list, one character
at a time, using a first-match policy:

1. For each input character, the first rule (in definition order) whose
   state, input (literal or ε) and stack top match the configuration fires.
2. Firing pops the stack top, pushes the replacement (first character on
   top) unless it is ε, and moves to the new state.
3. If no rule matches, the string is rejected. There is no backtracking.
4. After the input is exhausted, the string is accepted iff some rule pops
   the bottom marker Z on ε from the current state.

An ε rule fired mid-string still advances past one input character; the
simulation always moves in lockstep with the input.
"""

from typing import List, Optional, Sequence

from .errors import SimulationError
from .transitions import BOTTOM_MARKER, START_STATE, TransitionRecord


class SimulationStep:
    """One fired rule, with the configuration it produced."""

    def __init__(self, position: int, symbol: str, rule: TransitionRecord,
                 state: str, stack: List[str]):
        self.position = position
        self.symbol = symbol
        self.rule = rule
        self.state = state
        self.stack = stack

    def __str__(self):
        return (f"[{self.position}] '{self.symbol}' via {self.rule} "
                f"→ state={self.state}, stack={''.join(reversed(self.stack))}")


class SimulationResult:
    """
    Outcome of one simulation run.

    ``stack`` is listed bottom first. ``rejected_at`` is the input position
    where no rule matched, or None if the whole input was consumed.
    """

    def __init__(self, accepted: bool, state: str, stack: List[str],
                 steps: List[SimulationStep], rejected_at: Optional[int] = None):
        self.accepted = accepted
        self.state = state
        self.stack = stack
        self.steps = steps
        self.rejected_at = rejected_at

    @property
    def reason(self) -> str:
        if self.accepted:
            return "accepted"
        if self.rejected_at is not None:
            return f"no rule matches at position {self.rejected_at}"
        return f"no acceptance rule ({self.state},ε,{BOTTOM_MARKER}) -> (_,ε)"

    def __bool__(self):
        return self.accepted


class PDASimulator:
    """
    Simulates a PDA defined by an ordered transition list.

    The rule list is never modified; each call to ``run`` owns its own
    stack and current state, so one simulator can be reused freely.
    """

    def __init__(self, rules: Sequence[TransitionRecord]):
        self.rules = tuple(rules)

    def find_transition(self, state: str, symbol: str, top: str) -> Optional[TransitionRecord]:
        """Return the first rule eligible in this configuration, if any."""
        for rule in self.rules:
            if rule.matches(state, symbol, top):
                return rule
        return None

    def find_acceptance_rule(self, state: str) -> Optional[TransitionRecord]:
        for rule in self.rules:
            if rule.is_acceptance_rule(state):
                return rule
        return None

    def run(self, input_string: str) -> SimulationResult:
        """
        Simulate the PDA on ``input_string``.

        Args:
            input_string: String to test, read one character at a time

        Returns:
            SimulationResult with the verdict and the fired steps

        Raises:
            SimulationError: If a rule must be matched against an empty stack
        """
        if not isinstance(input_string, str):
            raise ValueError(f"Input must be a string, got {type(input_string).__name__}")

        stack = [BOTTOM_MARKER]
        current_state = START_STATE
        steps = []

        for position, symbol in enumerate(input_string):
            if not stack:
                raise SimulationError(
                    f"Stack underflow at position {position} in state {current_state}",
                    position=position,
                    state=current_state,
                )

            rule = self.find_transition(current_state, symbol, stack[-1])
            if rule is None:
                return SimulationResult(False, current_state, stack, steps,
                                        rejected_at=position)

            stack.pop()
            stack.extend(rule.push_symbols())
            current_state = rule.new_state
            steps.append(SimulationStep(position, symbol, rule, current_state, list(stack)))

        accepted = self.find_acceptance_rule(current_state) is not None
        return SimulationResult(accepted, current_state, stack, steps)


def accepts(input_string: str, rules: Sequence[TransitionRecord]) -> bool:
    """Decide whether the PDA defined by ``rules`` accepts ``input_string``."""
    return PDASimulator(rules).run(input_string).accepted


def simulate_pda(input_string: str,
                 rules: Sequence[TransitionRecord],
                 verbose: bool = False) -> bool:
    """
    Run the simulation and optionally print its trace.

    Args:
        input_string: String to test
        rules: Ordered transition list
        verbose: Print each fired rule and the verdict

    Returns:
        True if the string is accepted
    """
    result = PDASimulator(rules).run(input_string)

    if verbose:
        print(f"Start at: {START_STATE}, stack={BOTTOM_MARKER}")
        for step in result.steps:
            print(f"  {step}")
        status = "✓ ACCEPTED" if result.accepted else "✗ REJECTED"
        print(f"{status}: {result.reason}")

    return result.accepted

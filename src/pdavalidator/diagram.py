"""
Transition Diagram

Graph view of a parsed transition list, as handed to a diagram renderer.
States are nodes; every rule is its own edge (keyed by its position in the
definition), so parallel rules between the same pair of states are kept.

Positions come from a fixed coordinate table for the well-known states.
States outside the table are placed on a grid below it.
"""

import networkx as nx
import numpy as np
from typing import Dict, List, Sequence, Tuple

from .transitions import TransitionRecord

STATE_COORDINATES = {
    'q0': (100, 100),
    'q1': (350, 200),
    'q2': (600, 100),
    'qf': (800, 200),
}

GRID_ORIGIN = (100, 350)
GRID_SPACING = (250, 150)
GRID_COLUMNS = 4


class TransitionDiagram:
    """
    A directed multigraph over the states named in a transition list.

    Edge data:
    - rule: the TransitionRecord
    - label: "input, stackTop -> newStackTop"
    """

    def __init__(self, transitions: Sequence[TransitionRecord]):
        self.transitions = list(transitions)
        self.graph = nx.MultiDiGraph()

        for index, record in enumerate(self.transitions):
            self.graph.add_node(record.state)
            self.graph.add_node(record.new_state)
            self.graph.add_edge(record.state, record.new_state, key=index,
                                rule=record, label=record.label())

    def get_all_states(self) -> List[str]:
        """States in order of first appearance in the definition."""
        return list(self.graph.nodes())

    def get_all_transitions(self) -> List[Tuple[str, str, str]]:
        """All edges as (from_state, to_state, label), in definition order."""
        edges = sorted(self.graph.edges(keys=True, data=True), key=lambda e: e[2])
        return [(u, v, data['label']) for u, v, _, data in edges]

    def self_loops(self) -> List[TransitionRecord]:
        return [record for record in self.transitions if record.state == record.new_state]

    def get_unplaced_states(self) -> List[str]:
        return [s for s in self.get_all_states() if s not in STATE_COORDINATES]

    def get_state_positions(self, include_table_states: bool = True) -> Dict[str, Tuple[float, float]]:
        """
        Canvas coordinates for every state to draw.

        Args:
            include_table_states: Also place table states that no rule uses

        Returns:
            Mapping of state label to (x, y); y grows downwards
        """
        positions = {}
        for state, xy in STATE_COORDINATES.items():
            if include_table_states or state in self.graph:
                positions[state] = xy

        unplaced = self.get_unplaced_states()
        if unplaced:
            index = np.arange(len(unplaced))
            xs = GRID_ORIGIN[0] + (index % GRID_COLUMNS) * GRID_SPACING[0]
            ys = GRID_ORIGIN[1] + (index // GRID_COLUMNS) * GRID_SPACING[1]
            for state, x, y in zip(unplaced, xs, ys):
                positions[state] = (int(x), int(y))

        return positions

    def to_dict(self) -> Dict:
        """The renderer payload: transition list and state positions."""
        return {
            'transitions': [record.to_dict() for record in self.transitions],
            'positions': {s: list(xy) for s, xy in self.get_state_positions().items()},
        }


def build_transition_diagram(transitions: Sequence[TransitionRecord]) -> TransitionDiagram:
    return TransitionDiagram(transitions)

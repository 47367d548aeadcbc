"""
Diagram Renderer

Draws a TransitionDiagram with matplotlib: states as circles at their
canvas coordinates, one arrow per rule, loop arrows for self-transitions
and "input, stackTop -> newStackTop" labels. No automaton logic lives here.
"""

import matplotlib.pyplot as plt
import seaborn as sns
from collections import defaultdict
from matplotlib.patches import Circle, FancyArrowPatch
from pathlib import Path
from typing import Optional

from .diagram import TransitionDiagram

# Set style
sns.set_style("white")
plt.rcParams['font.family'] = 'DejaVu Sans'
plt.rcParams['font.size'] = 10

STATE_RADIUS = 30
CANVAS_MARGIN = 150
LABEL_SPACING = 18


class DiagramRenderer:
    """
    Renders transition diagrams to image files.
    """

    def __init__(self, output_dir: str = "diagram_output"):
        """
        Args:
            output_dir: Directory to save rendered diagrams
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _draw_states(self, ax, positions):
        for state, (x, y) in positions.items():
            ax.add_patch(Circle((x, y), STATE_RADIUS, facecolor='lightblue',
                                edgecolor='black', linewidth=2, zorder=3))
            ax.text(x, y, state, ha='center', va='center', fontsize=12, zorder=4)

    def _draw_self_loop(self, ax, x, y, label, index):
        loop = FancyArrowPatch(
            (x - 15, y - STATE_RADIUS + 4),
            (x + 15, y - STATE_RADIUS + 4),
            connectionstyle="arc3,rad=-2.2",
            arrowstyle='-|>',
            mutation_scale=15,
            linewidth=2,
            color='black',
            zorder=2,
        )
        ax.add_patch(loop)
        ax.text(x, y - STATE_RADIUS - 45 - index * LABEL_SPACING, label,
                ha='center', va='bottom', fontsize=10)

    def _draw_edge(self, ax, start, end, label, index):
        rad = 0.15 * index
        arrow = FancyArrowPatch(
            start, end,
            connectionstyle=f"arc3,rad={rad}",
            arrowstyle='-|>',
            mutation_scale=15,
            linewidth=2,
            color='black',
            shrinkA=STATE_RADIUS,
            shrinkB=STATE_RADIUS,
            zorder=2,
        )
        ax.add_patch(arrow)
        mid_x = (start[0] + end[0]) / 2
        mid_y = (start[1] + end[1]) / 2 - 10 - index * LABEL_SPACING
        ax.text(mid_x, mid_y, label, ha='center', va='bottom', fontsize=10,
                bbox=dict(facecolor='white', edgecolor='none', alpha=0.8, pad=1))

    def render(self,
               diagram: TransitionDiagram,
               title: Optional[str] = None,
               filename: str = "pda_diagram.png") -> Path:
        """
        Draw the diagram and save it.

        Args:
            diagram: The transition diagram to draw
            title: Optional title, e.g. the verdict message
            filename: Output file name inside output_dir

        Returns:
            Path of the saved image
        """
        positions = diagram.get_state_positions()

        width = max(x for x, _ in positions.values()) + CANVAS_MARGIN
        height = max(y for _, y in positions.values()) + CANVAS_MARGIN

        fig, ax = plt.subplots(figsize=(width / 100, height / 100))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect('equal')
        ax.axis('off')

        # Parallel rules between the same states get increasing offsets
        seen = defaultdict(int)
        for record in diagram.transitions:
            pair = (record.state, record.new_state)
            index = seen[pair]
            seen[pair] += 1

            x1, y1 = positions[record.state]
            if record.state == record.new_state:
                self._draw_self_loop(ax, x1, y1, record.label(), index)
            else:
                self._draw_edge(ax, (x1, y1), positions[record.new_state],
                                record.label(), index)

        self._draw_states(ax, positions)

        if title:
            ax.set_title(title, fontsize=13, fontweight='bold')

        save_path = self.output_dir / filename
        fig.savefig(save_path, dpi=100, bbox_inches='tight')
        plt.close(fig)

        return save_path


def render_transition_diagram(diagram: TransitionDiagram,
                              output_dir: str = "diagram_output",
                              title: Optional[str] = None,
                              filename: str = "pda_diagram.png") -> Path:
    return DiagramRenderer(output_dir).render(diagram, title=title, filename=filename)

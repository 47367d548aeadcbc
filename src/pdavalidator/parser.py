"""
Rule Parser

Parses a human-written language definition (one transition rule per line)
into an ordered list of TransitionRecords. Parsing is all-or-nothing: the
first malformed line aborts the whole parse.

Rule syntax:
    (state,input,stackTop) -> (newState,newStackTop)
"""

import re
from typing import List

from .errors import ParseError
from .transitions import TransitionRecord

INVALID_RULE_MESSAGE = (
    "Invalid rule format. Use (state, input, stackTop) -> (newState, newStackTop)"
)

RULE_PATTERN = re.compile(
    r'^\(([^,()]*),([^,()]*),([^,()]*)\)\s*->\s*\(([^,()]*),([^,()]*)\)$'
)


class RuleParser:
    """
    Converts raw rule text into transition records.

    Blank lines are not skipped: a line that is empty after trimming does
    not match the rule pattern and fails the parse like any other bad line.
    """

    def split_lines(self, text: str) -> List[str]:
        """
        Split the definition into trimmed lines.

        Args:
            text: Raw multi-line definition

        Returns:
            List of trimmed lines, blank ones included
        """
        return [line.strip() for line in text.split('\n')]

    def parse_rule(self, line: str, line_number: int) -> TransitionRecord:
        """
        Parse a single trimmed line into a TransitionRecord.

        Args:
            line: The rule text
            line_number: 1-based line number, reported on failure

        Returns:
            The parsed record

        Raises:
            ParseError: If the line is not a well-formed rule
        """
        match = RULE_PATTERN.match(line)
        if not match:
            raise ParseError(INVALID_RULE_MESSAGE, line_number=line_number, line=line)

        fields = [group.strip() for group in match.groups()]
        if not all(fields) or any('->' in field for field in fields):
            raise ParseError(INVALID_RULE_MESSAGE, line_number=line_number, line=line)

        return TransitionRecord(*fields)

    def parse(self, text: str) -> List[TransitionRecord]:
        """
        Parse every line of the definition, preserving line order.

        Raises:
            ParseError: On the first malformed line
        """
        if not isinstance(text, str):
            raise ValueError(f"Definition must be a string, got {type(text).__name__}")

        transitions = []
        for i, line in enumerate(self.split_lines(text), 1):
            transitions.append(self.parse_rule(line, i))
        return transitions


def parse_language_definition(definition: str, verbose: bool = False) -> List[TransitionRecord]:
    """
    Convert a language definition into its ordered transition list.

    Args:
        definition: Rule text, one rule per line
        verbose: Print the parsed rules

    Returns:
        List of TransitionRecords in input order

    Raises:
        ParseError: If any line is malformed
    """
    parser = RuleParser()

    try:
        transitions = parser.parse(definition)
    except ParseError as e:
        if verbose:
            print(f"✗ Line {e.line_number}: {e.line!r}")
        raise

    if verbose:
        print(f"Parsed {len(transitions)} rules:")
        for i, record in enumerate(transitions, 1):
            print(f"  {i}. {record}")

    return transitions

"""
Error types raised while parsing and simulating pushdown automata.
"""


class PDAError(Exception):
    """Base class for all validator errors."""


class ParseError(PDAError):
    """
    Raised when a line of the language definition is not a valid rule.

    The message is always the fixed invalid-format text; ``line_number``
    (1-based) and ``line`` point at the rule that failed.
    """

    def __init__(self, message: str, line_number: int = None, line: str = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class SimulationError(PDAError):
    """
    Raised when the simulation reaches an undefined configuration,
    e.g. a rule has to be matched against an empty stack.
    """

    def __init__(self, message: str, position: int = None, state: str = None):
        super().__init__(message)
        self.position = position
        self.state = state

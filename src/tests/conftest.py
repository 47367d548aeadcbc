import matplotlib
matplotlib.use("Agg")

import pytest

from pdavalidator import parse_language_definition

BALANCED_RULES = """(q0,a,Z) -> (q0,AZ)
(q0,a,A) -> (q0,AA)
(q0,b,A) -> (q1,ε)
(q1,b,A) -> (q1,ε)
(q1,ε,Z) -> (qf,ε)"""

SINGLE_STATE_RULES = """(q0,a,Z) -> (q0,AZ)
(q0,b,A) -> (q0,ε)
(q0,ε,Z) -> (qf,ε)"""


@pytest.fixture
def balanced_text():
    return BALANCED_RULES


@pytest.fixture
def balanced_rules():
    return parse_language_definition(BALANCED_RULES)


@pytest.fixture
def single_state_text():
    return SINGLE_STATE_RULES


@pytest.fixture
def single_state_rules():
    return parse_language_definition(SINGLE_STATE_RULES)

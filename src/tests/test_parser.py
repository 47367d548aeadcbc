import pytest

from pdavalidator import (
    INVALID_RULE_MESSAGE,
    ParseError,
    RuleParser,
    TransitionRecord,
    parse_language_definition
)


def test_parses_rules_in_order(balanced_text):
    rules = parse_language_definition(balanced_text)

    assert len(rules) == 5
    assert rules[0] == TransitionRecord("q0", "a", "Z", "q0", "AZ")
    assert rules[2] == TransitionRecord("q0", "b", "A", "q1", "ε")
    assert rules[4] == TransitionRecord("q1", "ε", "Z", "qf", "ε")
    assert [r.state for r in rules] == ["q0", "q0", "q0", "q1", "q1"]


def test_tolerates_whitespace():
    rules = parse_language_definition("  ( q0 , a , Z )   ->   ( q1 , AZ )  ")
    assert rules == [TransitionRecord("q0", "a", "Z", "q1", "AZ")]


def test_arrow_without_spaces():
    rules = parse_language_definition("(q0,a,Z)->(q1,AZ)")
    assert rules == [TransitionRecord("q0", "a", "Z", "q1", "AZ")]


def test_windows_line_endings():
    rules = parse_language_definition("(q0,a,Z) -> (q0,AZ)\r\n(q0,ε,Z) -> (qf,ε)")
    assert len(rules) == 2
    assert rules[0].new_stack_top == "AZ"


def test_multi_character_tokens():
    rules = parse_language_definition("(start,x,Bottom) -> (loop,XX)")
    assert rules[0].state == "start"
    assert rules[0].stack_top == "Bottom"


@pytest.mark.parametrize("line", [
    "(q0,a,Z) -> q0,AZ)",
    "(q0,a,Z) (q0,AZ)",
    "q0,a,Z -> (q0,AZ)",
    "(q0,a) -> (q0,AZ)",
    "(q0,a,Z,Y) -> (q0,AZ)",
    "(q0,a,Z) -> (q0)",
    "(q0,a,Z) -> (q0,AZ,X)",
    "(q0,,Z) -> (q0,AZ)",
    "(q0, ,Z) -> (q0,AZ)",
    "(q0,a,Z) -> (q0,)",
    "(q0,a,Z) -> (q0,AZ) trailing",
    "(q0,a,Z) -> (q0,A->Z)",
    "",
])
def test_malformed_lines(line):
    with pytest.raises(ParseError) as exc_info:
        parse_language_definition(line)
    assert str(exc_info.value) == INVALID_RULE_MESSAGE


def test_blank_line_fails_whole_parse():
    text = "(q0,a,Z) -> (q0,AZ)\n\n(q0,ε,Z) -> (qf,ε)"

    with pytest.raises(ParseError) as exc_info:
        parse_language_definition(text)

    assert exc_info.value.line_number == 2
    assert exc_info.value.line == ""


def test_error_reports_offending_line():
    text = "(q0,a,Z) -> (q0,AZ)\n(q0,b,A) => (q0,ε)"

    with pytest.raises(ParseError) as exc_info:
        RuleParser().parse(text)

    assert exc_info.value.line_number == 2
    assert exc_info.value.line == "(q0,b,A) => (q0,ε)"


def test_rejects_non_string():
    with pytest.raises(ValueError):
        RuleParser().parse(None)


def test_reparse_is_idempotent(balanced_text):
    assert parse_language_definition(balanced_text) == parse_language_definition(balanced_text)


def test_verbose_prints_rules(balanced_text, capsys):
    parse_language_definition(balanced_text, verbose=True)
    out = capsys.readouterr().out
    assert "Parsed 5 rules" in out
    assert "(q1,ε,Z) -> (qf,ε)" in out

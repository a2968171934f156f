import pytest

from argtree.parser import LevelState, TokenType, classify
from argtree.parser.tokenizer import is_help

UNBOUND = LevelState(all_positionals_bound=False)
BOUND = LevelState(all_positionals_bound=True)


@pytest.mark.parametrize(
    "raw, expected_type, expected_value",
    [
        ("-v", TokenType.SHORT_OPTION, "v"),
        ("-abc", TokenType.SHORT_OPTION, "a"),
        ("-", TokenType.SHORT_OPTION, ""),
        ("--verbose", TokenType.LONG_OPTION, "verbose"),
        ("--x", TokenType.LONG_OPTION, "x"),
        ("--", TokenType.DELIMITER, ""),
    ],
)
def test_classify_dash_prefixed(raw, expected_type, expected_value):
    """Dash-prefixed arguments classify the same regardless of level state."""
    for state in (UNBOUND, BOUND):
        token = classify(state, raw)
        assert token.type is expected_type
        assert token.value == expected_value
        assert token.raw == raw


def test_classify_invalid():
    assert classify(UNBOUND, "").type is TokenType.INVALID
    assert classify(BOUND, None).type is TokenType.INVALID


def test_bare_word_depends_on_positionals():
    """Bare words are positionals until every positional is bound."""
    assert classify(UNBOUND, "build").type is TokenType.POSITIONAL
    assert classify(BOUND, "build").type is TokenType.SUBCOMMAND
    dispatched = LevelState(all_positionals_bound=True, subcommand_dispatched=True)
    assert classify(dispatched, "build").type is TokenType.POSITIONAL


def test_three_dashes_is_not_an_option():
    token = classify(BOUND, "---x")
    assert token.type is TokenType.SUBCOMMAND
    assert token.value == "---x"
    assert classify(UNBOUND, "---x").type is TokenType.POSITIONAL


def test_classify_does_not_mutate_state():
    state = LevelState()
    classify(state, "word")
    classify(state, "--opt")
    assert state == LevelState()


def test_is_help():
    assert is_help(classify(BOUND, "-h"))
    assert is_help(classify(BOUND, "--help"))
    assert is_help(classify(BOUND, "--he"))
    assert not is_help(classify(BOUND, "--helpful"))
    assert not is_help(classify(BOUND, "-x"))
    assert not is_help(classify(BOUND, "help"))

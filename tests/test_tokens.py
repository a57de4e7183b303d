import pytest

from procmux.tokens import get_tokens, split, split_command


def test_split_keeps_bracketed_text_together():
    assert split("FOR [PRINT a, SLEEP 1] 3", " ") == ["FOR", "[PRINT a, SLEEP 1]", "3"]


def test_split_drops_empty_tokens():
    assert split(";;a;;b;", ";") == ["a", "b"]


def test_split_of_empty_string():
    assert split("", " ") == []


@pytest.mark.parametrize("text", ["a b c", "x [y z] w", "[only]"])
def test_split_rejoins_to_original_when_single_spaced(text):
    assert " ".join(split(text, " ")) == text


def test_split_command_plain_words():
    assert split_command("screen -s proc1 64") == ["screen", "-s", "proc1", "64"]


def test_split_command_quoted_argument():
    line = 'screen -c p1 64 "DECLARE x 5; PRINT x"'
    assert split_command(line) == ["screen", "-c", "p1", "64", "DECLARE x 5; PRINT x"]


def test_split_command_collapses_whitespace():
    assert split_command("  screen   -ls  ") == ["screen", "-ls"]


def test_split_command_unterminated_quote_runs_to_end():
    assert split_command('a "b c') == ["a", "b c"]


def test_split_command_empty():
    assert split_command("   ") == []


def test_get_tokens_keeps_empty_fields():
    assert get_tokens("a  b", " ") == ["a", "", "b"]


def test_get_tokens_ignores_trailing_delimiter():
    assert get_tokens("screen -ls ", " ") == ["screen", "-ls"]


def test_get_tokens_empty():
    assert get_tokens("", " ") == []


def test_get_tokens_round_trip():
    command = "screen -r proc"
    assert " ".join(get_tokens(command, " ")) == command
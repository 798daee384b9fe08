import pytest

from apps.cli.run import main


@pytest.mark.parametrize("value", ["-1", "-50", "ten"])
def test_games_must_be_a_non_negative_integer(value, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--games", value])
    assert exc.value.code == 2
    assert "--games" in capsys.readouterr().err


def test_help_description_is_plain(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])
    out = capsys.readouterr().out
    assert "wordle autosolver: letter-frequency solver runs" in out
    assert "\u2014" not in out

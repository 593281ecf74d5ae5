import pytest

from termcodes.__main__ import main


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    monkeypatch.delenv("TERMCODES_RAW", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_main_style(capsys):
    main(["style", "bold", "underlined"])
    assert capsys.readouterr().out == "\x1b[1;4m"


def test_main_raw(capsys, monkeypatch):
    main(["--raw", "style", "not-bold"])
    assert capsys.readouterr().out == "'\\x1b[21;22m'\n"

    monkeypatch.setenv("TERMCODES_RAW", "1")
    main(["fg", "red"])
    assert capsys.readouterr().out == "'\\x1b[31m'\n"

    for value in ["0", "false", "Off", ""]:
        monkeypatch.setenv("TERMCODES_RAW", value)
        main(["fg", "red"])
        assert capsys.readouterr().out == "\x1b[31m", value


def test_main_colors(capsys):
    main(["fg", "200"])
    assert capsys.readouterr().out == "\x1b[38;5;200m"

    main(["bg", "10", "20", "30"])
    assert capsys.readouterr().out == "\x1b[48;2;10;20;30m"

    main(["bg", "#0a141e"])
    assert capsys.readouterr().out == "\x1b[48;2;10;20;30m"

    main(["fg"])
    assert capsys.readouterr().out == "\x1b[39m"


def test_main_font_and_cursor(capsys):
    main(["font", "3"])
    assert capsys.readouterr().out == "\x1b[13m"

    main(["cursor", "up"])
    assert capsys.readouterr().out == "\x1b[1A"

    main(["cursor", "next-line", "4"])
    assert capsys.readouterr().out == "\x1b[4E"


def test_main_list(capsys, monkeypatch):
    main(["list"])
    output = capsys.readouterr().out

    assert "not_framed_or_encircled" in output
    assert "strikethrough" in output
    assert "\x1b[1mSample\x1b[0m" in output

    monkeypatch.setenv("NO_COLOR", "1")
    main(["list"])
    assert "Sample" not in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["font", "10"],
        ["style", "sparkly"],
        ["fg", "orange"],
        ["fg", "1", "2"],
        ["bg", "#12"],
    ],
)
def test_main_errors(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)

    assert info.value.code == 2
    assert "termcodes: error:" in capsys.readouterr().err

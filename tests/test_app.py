import io

import pytest

from exquisite_verse.app import DisplayMode, ExquisiteVerse, ImportError_, main
from exquisite_verse.poem import Poem

CLEARTEXT = "Roses are red\nViolets are blue\nSugar is sweet\nAnd so are you."
FULLY_OBFUSCATED = (
    "Um9zZXMgYXJlIHJlZA==\nVmlvbGV0cyBhcmUgYmx1ZQ==\nU3VnYXIgaXMgc3dlZXQ=\nQW5kIHNvIGFyZSB5b3Uu"
)


def _app_with_poem():
    app = ExquisiteVerse()
    for line in CLEARTEXT.split("\n"):
        app.add_line(line)
    return app


def test_default_state():
    app = ExquisiteVerse()
    assert app.display_mode is DisplayMode.SEMI_OBFUSCATED
    assert app.import_mode is False
    assert app.rendered() == ""


def test_rendered_follows_mode():
    app = _app_with_poem()
    app.display_mode = DisplayMode.CLEARTEXT
    assert app.rendered() == CLEARTEXT
    app.display_mode = DisplayMode.FULLY_OBFUSCATED
    assert app.rendered() == FULLY_OBFUSCATED
    app.display_mode = DisplayMode.SEMI_OBFUSCATED
    assert app.rendered() == Poem(CLEARTEXT).as_semi_obfuscated()


def test_add_line_ignores_empty():
    app = ExquisiteVerse()
    assert app.add_line("") is False
    assert app.add_line("Roses are red") is True
    assert app.poem.lines == ("Roses are red",)


def test_clear_poem():
    app = _app_with_poem()
    app.clear_poem()
    assert len(app.poem) == 0


def test_toggle_import_prefills_and_cancels():
    app = _app_with_poem()
    app.display_mode = DisplayMode.FULLY_OBFUSCATED
    app.toggle_import()
    assert app.import_mode is True
    assert app.import_text == FULLY_OBFUSCATED
    app.toggle_import()
    assert app.import_mode is False
    assert app.import_text == ""


def test_confirm_import_fully_obfuscated():
    app = ExquisiteVerse()
    app.display_mode = DisplayMode.FULLY_OBFUSCATED
    app.toggle_import()
    app.import_text = FULLY_OBFUSCATED
    app.confirm_import()
    assert app.poem.as_cleartext() == CLEARTEXT
    assert app.import_mode is False
    assert app.import_text == ""


def test_import_cleartext():
    app = ExquisiteVerse()
    app.display_mode = DisplayMode.CLEARTEXT
    app.import_text = CLEARTEXT
    app.try_import_poem()
    assert app.poem == Poem(CLEARTEXT)


def test_empty_import_keeps_poem():
    app = _app_with_poem()
    app.import_text = ""
    app.try_import_poem()
    assert app.poem == Poem(CLEARTEXT)


def test_failed_import_keeps_state():
    app = _app_with_poem()
    app.display_mode = DisplayMode.SEMI_OBFUSCATED
    app.toggle_import()
    app.import_text = "not base64!\nlast"
    with pytest.raises(ImportError_, match="Failed to import semi-obfuscated poem"):
        app.confirm_import()
    assert app.import_mode is True
    assert app.poem == Poem(CLEARTEXT)


def test_failed_fully_obfuscated_import_message():
    app = ExquisiteVerse()
    app.display_mode = DisplayMode.FULLY_OBFUSCATED
    app.import_text = CLEARTEXT
    with pytest.raises(ImportError_, match="Failed to import fully-obfuscated poem"):
        app.try_import_poem()


def test_copy_feedback_timer():
    app = _app_with_poem()
    assert app.mark_copied() == app.rendered()
    assert app.show_copied is True
    app.tick(0.5)
    assert app.show_copied is True
    app.tick(0.5)
    assert app.show_copied is False
    assert app.copy_feedback_timer is None


def test_main_adds_and_shows(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CLEARTEXT + "\n:mode clear\n:show\n:quit\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == CLEARTEXT + "\n"


def test_main_imports(monkeypatch, capsys):
    script = ":mode full\n:import\n" + FULLY_OBFUSCATED + "\n:done\n:mode clear\n:show\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith(CLEARTEXT + "\n")
    assert FULLY_OBFUSCATED in out


def test_main_reports_import_error(monkeypatch, capsys):
    script = ":import\nnot base64!\nlast\n:done\n:cancel\n:show\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    main(["--mode", "semi"])
    assert "Error: Failed to import semi-obfuscated poem" in capsys.readouterr().out


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main(["--mode", "bogus"])
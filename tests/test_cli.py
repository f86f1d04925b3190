import io
import json

import pyperclip

import main
from FormulaCore import cli


def test_checkout_entry_point_uses_cli():
    assert main.main is cli.main


def test_demo_prints_every_section(capsys):
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("=== Formula Evaluator Demo ===")
    for title, _ in cli.DEMO_SECTIONS:
        assert f"{title}:" in out
    assert "  multiply(add(2, 3), divide(10, 2)) = 25" in out
    assert "  divide(10, 3) [4 places] = 3.3333" in out
    assert "  divide(10, 0) = Error: Division by zero" in out


def test_run_demo_to_stream():
    out = io.StringIO()
    cli.run_demo(out)
    assert "  add(2, 3) = 5" in out.getvalue()


def test_single_formula(capsys):
    assert cli.main(["add(2, multiply(3, 4))"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_single_formula_with_places(capsys):
    assert cli.main(["divide(10, 3)", "--places", "4"]) == 0
    assert capsys.readouterr().out == "3.3333\n"


def test_settings_file_sets_cli_defaults(isolated_settings, capsys):
    isolated_settings.write_text(json.dumps({"decimal_places": 5}), encoding="utf-8")

    assert cli.main(["divide(10, 3)"]) == 0
    assert capsys.readouterr().out == "3.33333\n"


def test_places_option_beats_settings_file(isolated_settings, capsys):
    isolated_settings.write_text(json.dumps({"decimal_places": 5}), encoding="utf-8")

    assert cli.main(["divide(10, 3)", "-p", "1"]) == 0
    assert capsys.readouterr().out == "3.3\n"


def test_settings_file_sets_nesting_limit(isolated_settings, capsys):
    isolated_settings.write_text(json.dumps({"max_nesting_depth": 2}), encoding="utf-8")

    assert cli.main(["add(1, add(2, 3))"]) == 0
    assert capsys.readouterr().out.startswith("Error while parsing formula: ")


def test_negative_places_setting_is_ignored(isolated_settings):
    isolated_settings.write_text(json.dumps({"decimal_places": -3}), encoding="utf-8")
    assert cli.load_engine_settings() == (2, 100)


def test_negative_places_rejected(capsys):
    assert cli.main(["divide(10, 3)", "-p", "-1"]) == 2
    assert "must not be negative" in capsys.readouterr().err


def test_copy_to_clipboard(monkeypatch, capsys):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert cli.main(["add(2, 3)", "--copy"]) == 0
    assert copied == ["5"]


def test_copy_failure_is_not_fatal(monkeypatch, capsys):
    def no_clipboard(text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, "copy", no_clipboard)
    assert cli.main(["add(2, 3)", "-c"]) == 0
    assert capsys.readouterr().out == "5\n"

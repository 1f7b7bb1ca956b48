import io

import pytest

from hashoff import cli
from hashoff.cli import MenuOption, main, menu_options, run_menu


def scripted(*replies):
    remaining = iter(replies)

    def read(_prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def recording_option(name, calls):
    return MenuOption(name, lambda input_fn, out: calls.append(name))


def test_menu_options_names_and_order():
    names = [option.name for option in menu_options()]
    assert len(names) == 2
    assert names[1] == "Performance Analysis"
    assert all(callable(option.callback) for option in menu_options())


def test_run_menu_runs_selected_option_once():
    calls = []
    out = io.StringIO()
    run_menu([recording_option("demo", calls)], scripted("", "0", "n"), out)
    assert calls == ["demo"]
    text = out.getvalue()
    assert text.startswith("You have switched to the console window. Press ENTER to continue.")
    assert text.rstrip().endswith("Exiting...")


def test_run_menu_lists_options_with_quit_last():
    out = io.StringIO()
    run_menu([recording_option("alpha", []), recording_option("beta", [])],
             scripted("", "2"), out)
    text = out.getvalue()
    assert cli.PROGRAM_TITLE in text
    assert "Please make a selection:" in text
    assert "0 alpha\n1 beta\n2 Quit\n" in text


def test_quit_runs_nothing():
    calls = []
    out = io.StringIO()
    run_menu([recording_option("demo", calls)], scripted("", "1"), out)
    assert calls == []
    assert "Exiting..." in out.getvalue()


def test_pick_again_loops():
    calls = []
    options = [recording_option("a", calls), recording_option("b", calls)]
    run_menu(options, scripted("", "0", "y", "1", "n"), io.StringIO())
    assert calls == ["a", "b"]


def test_out_of_range_selection_is_reprompted():
    calls = []
    out = io.StringIO()
    run_menu([recording_option("demo", calls)], scripted("", "7", "0", "n"), out)
    assert calls == ["demo"]
    assert "Please enter a number between 0 and 1" in out.getvalue()


def test_interactive_demo_through_menu():
    out = io.StringIO()
    run_menu(menu_options(), scripted("", "0", "i 5", "c 5", "q", "n"), out)
    text = out.getvalue()
    assert "Attempted to add 5 to the table. Result: true" in text
    assert "Is 5 in the table? true" in text
    assert "success." in text


def test_performance_demo_with_word_list(tmp_path, monkeypatch):
    (tmp_path / "res").mkdir()
    (tmp_path / "res" / "EnglishWords.txt").write_text("apple banana cherry\n")
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run_menu(menu_options(), scripted("", "1", "n"), out)
    text = out.getvalue()
    assert "Evaluating on load factor alpha = 0.5..." in text
    assert "Evaluating on load factor alpha = 0.97..." in text
    assert text.count("  Insert (success): ") == 9


def test_performance_demo_missing_word_list(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run_menu(menu_options(), scripted("", "1", "n"), out)
    assert "Cannot read word list:" in out.getvalue()


def test_run_menu_propagates_end_of_input():
    with pytest.raises(EOFError):
        run_menu([recording_option("demo", [])], scripted(), io.StringIO())


def test_main_quits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted("", "2"))
    assert main([]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_main_handles_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted())
    assert main([]) == 0
    assert "Exiting..." in capsys.readouterr().out
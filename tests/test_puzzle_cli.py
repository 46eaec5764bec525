import pytest

from algolab.puzzle import END_STATE, format_path, format_state, neighbors
from algolab.puzzle_cli import main, report
from algolab.puzzle_search import SearchResult


def _near_goal():
    return next(iter(neighbors(END_STATE)))


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_report_without_depth():
    start = _near_goal()
    result = SearchResult([start, END_STATE], expanded=3)
    text = report("BFS", result, start, END_STATE)
    assert text.startswith("BFS\nStart status:\n" + format_state(start))
    assert "Total number of extended nodes: 3\n" in text
    assert "Length of path: 1\n" in text
    assert "Maximum depth reached" not in text
    assert text.endswith("Path:\n" + format_path(result.path))


def test_report_with_depth():
    start = _near_goal()
    result = SearchResult([start, END_STATE], expanded=2, max_depth=4)
    text = report("IDDFS", result, start, END_STATE)
    assert "Maximum depth reached: 4\n" in text
    assert "Target status:\n" + format_state(END_STATE) in text


@pytest.mark.parametrize("choice,name", [("1", "BFS"), ("2", "IDDFS"), ("3", "IDA*")])
def test_main_runs_chosen_search(monkeypatch, capsys, choice, name):
    start = _near_goal()
    _feed(monkeypatch, [choice, "q"])
    assert main(["--start", start, "--goal", END_STATE]) == 0
    out = capsys.readouterr().out
    assert f"\n{name}\nStart status:" in out
    assert "Length of path: 1\n" in out
    assert out.count("Input your choice.") == 2


def test_main_quits_immediately(monkeypatch, capsys):
    _feed(monkeypatch, ["q"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Path:" not in out
    assert out.count("Input your choice.") == 1


def test_main_ignores_unknown_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "q"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Path:" not in out
    assert out.count("Input your choice.") == 2


def test_main_reports_unsolvable(monkeypatch, capsys):
    _feed(monkeypatch, ["1"])
    assert main(["--start", " 42763815", "--goal", END_STATE]) == 0
    out = capsys.readouterr().out
    assert "cannot be reached" in out
    assert "Path:" not in out
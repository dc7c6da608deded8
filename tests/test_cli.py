import json

import pytest

from jitcli.cli import build_parser, main
from jitcli.enhanced import render_enhanced_tree
from jitcli.ticket import sample_tickets
from jitcli.tree import render_tree, sort_tickets


@pytest.fixture(autouse=True)
def _plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def _sorted_samples():
    tickets = sample_tickets()
    sort_tickets(tickets)
    return tickets


def test_version_command(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out == "jit version 0.0.1\n"


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "jit version 0.0.1" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: jit" in capsys.readouterr().out


def test_status_valid(capsys):
    main(["status", "progress"])
    assert "Would change current focus status to: In Progress" in capsys.readouterr().out


def test_status_invalid(capsys):
    main(["status", "later"])
    assert capsys.readouterr().out == "Invalid status. Use: todo, progress, done, or blocked\n"


def test_status_requires_argument():
    with pytest.raises(SystemExit) as exc:
        main(["status"])
    assert exc.value.code == 2


def test_cleanup_variants(capsys):
    main(["cleanup", "--dry-run"])
    assert "Would remove all done tickets" in capsys.readouterr().out
    main(["cleanup"])
    assert "Removing all done tickets..." in capsys.readouterr().out
    main(["cleanup", "PROJ-100", "--dry-run"])
    assert "Would remove ticket: PROJ-100" in capsys.readouterr().out
    main(["cleanup", "PROJ-100"])
    assert "Removing ticket: PROJ-100" in capsys.readouterr().out


def test_log_tree_matches_renderer(capsys):
    main(["log"])
    out = capsys.readouterr().out
    assert out == render_tree(_sorted_samples(), "", "", "PROJ-103", False)
    assert out.count("@") == 1


def test_log_orphan_flag(capsys):
    main(["log", "--orphan"])
    out = capsys.readouterr().out
    assert out == render_tree(_sorted_samples(), "", "", "PROJ-103", True)
    assert "== ORPHAN TASKS ==" in out


def test_log_json(capsys):
    main(["log", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["current_focus"] == {"epic": "", "task": "", "subtask": "PROJ-103"}
    assert [t["key"] for t in data["tickets"]] == [t.key for t in _sorted_samples()]


def test_log_status_filter(capsys):
    main(["log", "--json", "--status", "done"])
    data = json.loads(capsys.readouterr().out)
    assert data["tickets"]
    assert all(t["status"] == "Done" for t in data["tickets"])


def test_log_enhanced_matches_renderer(capsys):
    main(["log-enhanced", "--all"])
    out = capsys.readouterr().out
    assert out == render_enhanced_tree(_sorted_samples(), "PROJ-100", "PROJ-101", "PROJ-103", True)


def test_log_enhanced_json_focus(capsys):
    main(["log-enhanced", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["current_focus"] == {
        "epic": "PROJ-100",
        "task": "PROJ-101",
        "subtask": "PROJ-103",
    }


def test_parser_defaults():
    args = build_parser().parse_args(["log-enhanced"])
    assert args.tui is True
    assert args.no_tui is False
    assert args.status == ""
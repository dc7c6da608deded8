"""Command line entry point for jit."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional

from jitcli.enhanced import render_enhanced_tree
from jitcli.ticket import sample_tickets
from jitcli.tree import filter_tickets_by_status, render_json, render_tree, sort_tickets
from jitcli.workflow import normalize_status

VERSION = "0.0.1"

_DESCRIPTION = (
    "JIT - A jira experience like git, focus ticket work like branches\n\n"
    "jit is a local-first CLI tool that lets developers write tasks and sub-tasks "
    "in markdown,\nauto-enriches raw task descriptions into manager-optimized Jira "
    "tickets, and syncs with Jira\nto reflect status, updates, and structure."
)

_EMPTY_JSON = (
    '{\n  "current_focus": {\n    "epic": "",\n    "task": "",\n'
    '    "subtask": ""\n  },\n  "tickets": []\n}'
)

_LOG_FOCUS = ("", "", "PROJ-103")
_ENHANCED_FOCUS = ("PROJ-100", "PROJ-101", "PROJ-103")


def _show_tickets(
    args: argparse.Namespace,
    focus: tuple[str, str, str],
    render: Callable[..., str],
) -> int:
    tickets = sample_tickets()
    if not tickets:
        if args.json:
            print(_EMPTY_JSON)
        else:
            print("No tickets found. Use 'jit track <ticket>' to start tracking tickets.")
        return 0
    if args.status:
        tickets = filter_tickets_by_status(tickets, args.status)
    sort_tickets(tickets)
    if args.json:
        print(render_json(tickets, *focus), end="")
    else:
        print(render(tickets, *focus, args.orphan or args.all), end="")
    return 0


def _cmd_log(args: argparse.Namespace) -> int:
    return _show_tickets(args, _LOG_FOCUS, render_tree)


def _cmd_log_enhanced(args: argparse.Namespace) -> int:
    return _show_tickets(args, _ENHANCED_FOCUS, render_enhanced_tree)


def _cmd_status(args: argparse.Namespace) -> int:
    try:
        status = normalize_status(args.status)
    except ValueError as err:
        print(err)
        return 0
    print(f"Would change current focus status to: {status}")
    return 0


def _cmd_cleanup(args: argparse.Namespace) -> int:
    if args.ticket_key is None:
        print("Would remove all done tickets" if args.dry_run else "Removing all done tickets...")
    elif args.dry_run:
        print(f"Would remove ticket: {args.ticket_key}")
    else:
        print(f"Removing ticket: {args.ticket_key}")
    return 0


def _cmd_version(args: argparse.Namespace) -> int:
    print(f"jit version {VERSION}")
    return 0


def _add_log_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--all", action="store_true",
                        help="Show all tickets (not just current context)")
    parser.add_argument("--status", default="",
                        help="Filter by status (e.g., 'In Progress', 'Done')")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--orphan", action="store_true", help="Show orphaned tasks")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the jit command."""
    parser = argparse.ArgumentParser(
        prog="jit",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"jit version {VERSION}")
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    status = sub.add_parser("status", help="Change status of current focus item")
    status.add_argument("status", help="todo, progress, done or blocked")
    status.set_defaults(handler=_cmd_status)

    cleanup = sub.add_parser("cleanup", help="Remove done tickets")
    cleanup.add_argument("ticket_key", nargs="?", default=None)
    cleanup.add_argument("--dry-run", action="store_true",
                         help="Show what would be removed without doing it")
    cleanup.set_defaults(handler=_cmd_cleanup)

    log = sub.add_parser("log", help="Display ticket tree view")
    _add_log_flags(log)
    log.set_defaults(handler=_cmd_log)

    enhanced = sub.add_parser("log-enhanced",
                              help="Display enhanced ticket tree view with colors")
    _add_log_flags(enhanced)
    enhanced.add_argument("--tui", action="store_true", default=True,
                          help="Enable TUI mode (default)")
    enhanced.add_argument("--no-tui", action="store_true", help="Force text-only output")
    enhanced.set_defaults(handler=_cmd_log_enhanced)

    version = sub.add_parser("version", help="Print the version number of jit")
    version.set_defaults(handler=_cmd_version)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the jit command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
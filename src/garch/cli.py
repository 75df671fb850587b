"""CLI entry point for garch."""

import argparse
import logging
import sys

import garch
import garch.io.logging_setup
import garch.settings
from garch.core.commits import parse_line_log
from garch.core.diff_changes import commit_changes
from garch.core.highlight import Highlighter
from garch.core.line_range import LineWindow, parse_file_range
from garch.core.versions import build_file_versions, order_versions
from garch.errors import GarchError, RenderFailure
from garch.io.git_queries import GitQueryService
from garch.report import write_summary
from garch.tui.app import run_viewer

logger = logging.getLogger(__name__)

USAGE_HINT = "Use 'garch --help' for usage information"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="garch", description="Explore the evolution of code through git history"
    )
    parser.add_argument("--version", action="version", version=f"garch {garch.__version__}")
    subparsers = parser.add_subparsers(dest="command")

    lines = subparsers.add_parser(
        "lines", help="Trace the evolution of specific lines in a file"
    )
    lines.add_argument(
        "file_range",
        help="File and line range (e.g. src/main.rs:10-20, src/main.rs:42, src/main.rs)",
    )
    lines.add_argument(
        "--summary",
        action="store_true",
        default=False,
        help="Print each commit's changes to the range instead of opening the viewer",
    )

    file_ = subparsers.add_parser("file", help="Show the evolution of an entire file")
    file_.add_argument("file_path", help="Path to the file")

    for sub in (lines, file_):
        sub.add_argument(
            "-r",
            "--reverse",
            action="store_true",
            default=False,
            help="Show newest commit first (default: oldest first)",
        )
        sub.add_argument(
            "--plain",
            action="store_true",
            default=False,
            help="Disable syntax highlighting",
        )
    return parser


def _make_highlighter(path: str, plain: bool):
    if plain or not garch.settings.load_highlight_enabled():
        return None
    highlighter = Highlighter.for_path(path)
    logger.debug("highlighting %s as %s", path, highlighter.lexer_name)
    return highlighter


def _view(queries: GitQueryService, window: LineWindow, reverse: bool, plain: bool) -> int:
    versions = build_file_versions(queries, window.path, _make_highlighter(window.path, plain))
    if not versions:
        print(f"No git history found for {window.path}")
        return 0
    versions = order_versions(versions, newest_first=reverse)
    status = run_viewer(window.path, versions, start=window.start, end=window.end)
    if status:
        raise RenderFailure(f"interactive viewer exited with status {status}")
    return 0


def handle_lines_command(args: argparse.Namespace, queries: GitQueryService) -> int:
    window = parse_file_range(args.file_range)
    if not window.bounded:
        if args.summary:
            print("--summary needs a line range (path:start-end)", file=sys.stderr)
            return 1
        return _view(queries, window, args.reverse, args.plain)

    commits = parse_line_log(queries.line_history(window.path, window.start, window.end))
    if not commits:
        print(f"No history found for {window.describe()}")
        return 0

    if args.summary:
        ordered = commits if args.reverse else list(reversed(commits))
        write_summary(
            sys.stdout,
            f"History of {window.describe()} ({len(ordered)} commits)",
            ordered,
            lambda commit: commit_changes(
                queries, commit.hash, window.path, window.start, window.end
            ),
        )
        return 0

    return _view(queries, window, args.reverse, args.plain)


def handle_file_command(args: argparse.Namespace, queries: GitQueryService) -> int:
    print(f"Loading file history for {args.file_path}...")
    return _view(queries, LineWindow(path=args.file_path), args.reverse, args.plain)


_HANDLERS = {
    "lines": handle_lines_command,
    "file": handle_file_command,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print(USAGE_HINT)
        return 0

    interactive = not getattr(args, "summary", False)
    log_runtime = garch.io.logging_setup.configure(interactive=interactive)
    logger.info(
        "logging configured level=%s file=%s",
        log_runtime.level_name,
        log_runtime.file_path,
    )

    queries = GitQueryService(git_command=garch.settings.load_git_command())
    try:
        return _HANDLERS[args.command](args, queries)
    except GarchError as exc:
        logger.info("%s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

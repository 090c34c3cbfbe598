#!/usr/bin/env python3
"""
cli.py - clipkit command line entry point.

Reads the clipboard, runs one named transform over it, prints the result and
writes it back to the clipboard.

Usage:
    clipkit [--config clipkit.ini] [--dry-run] [--no-log] [-v] <command>

    clipkit reddit-top         # rewrite the reddit link on the clipboard
    clipkit uuid7              # no input needed; puts a fresh UUID on the clipboard
    clipkit config-espanso     # espanso matches for every command
    clipkit history --tag err  # recent entries from the run log
"""

import argparse
import sqlite3
import sys
from datetime import datetime

from clipkit import __version__, espanso
from clipkit.clipboard import read_clipboard, write_clipboard
from clipkit.config import load_settings
from clipkit.db_logger import DBLogger, NullLogger
from clipkit.dispatcher import Dispatcher
from clipkit.errors import ClipKitError
from clipkit.registry import Registry, load_registry

ESPANSO_COMMAND = "config-espanso"
HISTORY_COMMAND = "history"
PROG = "clipkit"


# ─── Argument parsing ─────────────────────────────────────────────────────────

def build_parser(registry: Registry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Run one text transform over the clipboard contents.",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("--config", "-c", default=None,
                        help="Path to clipkit.ini (default: ~/.clipkit/clipkit.ini).")
    parser.add_argument("--dry-run", "-n", action="store_true",
                        help="Print the result but leave the clipboard untouched.")
    parser.add_argument("--no-log", action="store_true",
                        help="Do not record this run in the run log.")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Echo run log lines to stderr.")

    sub = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    for cmd in registry:
        sub.add_parser(cmd.name, help=cmd.description, description=cmd.description)

    sub.add_parser(ESPANSO_COMMAND,
                   help="Print an espanso match file with a trigger per command.")

    history = sub.add_parser(HISTORY_COMMAND, help="Show recent run log entries.")
    history.add_argument("--limit", "-l", type=int, default=50,
                         help="Number of entries to show (default: 50).")
    history.add_argument("--tag", "-t", default=None,
                         choices=("info", "preview", "ok", "warn", "err"),
                         help="Only show entries with this tag.")
    history.add_argument("--command", dest="filter_command", default=None,
                         choices=(*registry.names(), ESPANSO_COMMAND),
                         help="Only show entries logged by this command.")
    return parser


# ─── Logging ──────────────────────────────────────────────────────────────────

def open_logger(settings, command: str, enabled: bool = True):
    if not (enabled and settings.log):
        return NullLogger()
    try:
        return DBLogger(settings.log_db, settings.retain_days, command=command)
    except (sqlite3.Error, OSError) as exc:
        print(f"{PROG}: warning: run log unavailable ({exc})", file=sys.stderr)
        return NullLogger()


def make_log(logger, verbose: bool = False):
    def _log(message: str, tag: str = "info"):
        logger.log(message, tag)
        if verbose:
            ts = datetime.now().strftime("%H:%M:%S")
            print(f"[{ts}] {message}", file=sys.stderr)
    return _log


def format_history(entries: list) -> str:
    lines = []
    for e in entries:
        ts = e["timestamp"][:19].replace("T", " ")
        lines.append(f"{ts}  {e['tag']:<7} {e['command'] or '-':<14} {e['message']}")
    return "\n".join(lines)


# ─── Entry point ──────────────────────────────────────────────────────────────

def run(args, settings, log) -> str:
    """Produce the output for *args.command*; transform or espanso config."""
    registry = load_registry(settings.overrides)
    for name in settings.overrides:
        if name not in registry:
            log(f"Config section [command:{name}] matches no command", "warn")

    if args.command == ESPANSO_COMMAND:
        log(f"▶ [{ESPANSO_COMMAND}] {len(registry)} commands", "info")
        return espanso.render(registry)
    return Dispatcher(registry, log).execute(args.command, read_clipboard)


def main(argv=None) -> int:
    args = build_parser(load_registry()).parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ClipKitError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1

    logger = open_logger(settings, args.command, enabled=not args.no_log)
    log = make_log(logger, args.verbose)
    try:
        if args.command == HISTORY_COMMAND:
            if isinstance(logger, NullLogger):
                print(f"{PROG}: run log is disabled", file=sys.stderr)
                return 1
            entries = logger.get_entries(
                tag=args.tag, command=args.filter_command, limit=args.limit
            )
            sys.stdout.write(format_history(entries) + "\n" if entries else "")
            return 0

        result = run(args, settings, log)

        if args.dry_run:
            log("  Dry run - clipboard left untouched", "warn")
        else:
            write_clipboard(result)
            log(f"  ✓ {len(result)} chars written to clipboard", "ok")

        sys.stdout.write(result.strip())
        sys.stdout.flush()
        return 0

    except ClipKitError as exc:
        log(f"✗ {exc}", "err")
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    finally:
        logger.close()


if __name__ == "__main__":
    sys.exit(main())

# Area: CLI
"""
drivethru_scorer.cli - Command-line interface
=============================================

A text console that stands in for the voice platform: each line is
one recognized intent with its slots.

Usage:
    python -m drivethru_scorer                          # Default database
    python -m drivethru_scorer --db scores.db --session S1
    python -m drivethru_scorer --config config.json

Input lines look like:
    Launch
    ProvideName PlayerName=Ann
    AddScore PlayerName=Ann ScoreNumber=5
"""

import argparse
import shlex
import sys
import uuid
from typing import Any, Dict, Optional, TextIO

from ._config import load_config, resolve_log_level, validate_config
from ._shared.logging_config import setup_logging
from .errors import StorageError
from .types import DialogueResponse, InboundEvent


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Drive Thru score keeper - text console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m drivethru_scorer
  python -m drivethru_scorer --db scores.db --session S1
  DRIVETHRU_DB_PATH=scores.db python -m drivethru_scorer
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--db",
        type=str,
        help="Path to the SQLite score database (overrides config)",
    )

    parser.add_argument(
        "--session",
        type=str,
        help="Session id to use (default: a new random id)",
    )

    return parser.parse_args(argv)


def parse_event_line(line: str, session_id: str) -> Optional[InboundEvent]:
    """
    Turn one console line into an inbound event.

    Args:
        line: "IntentName Slot=value ..."; values may be quoted
        session_id: Session the event belongs to

    Returns:
        The event, or None for a blank line

    Raises:
        ValueError: If a slot token has no '='
    """
    tokens = shlex.split(line)
    if not tokens:
        return None
    intent_name, slot_tokens = tokens[0], tokens[1:]
    slots: Dict[str, str] = {}
    for token in slot_tokens:
        name, sep, value = token.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected Slot=value, got '{token}'")
        slots[name] = value
    return InboundEvent(session_id=session_id, intent_name=intent_name, slots=slots)


def render_response(response: DialogueResponse, out: TextIO = sys.stdout) -> None:
    """Print a response the way a device would present it."""
    print(f"> {response.speech_text}", file=out)
    if response.card is not None:
        print(f"[{response.card.title}]", file=out)
        print(response.card.body.rstrip("\n"), file=out)
    if response.should_end_session:
        print("(session ended)", file=out)


def run_console(
    config: Dict[str, Any],
    session_id: str,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
) -> int:
    """
    Read events from stdin until EOF or the session ends.

    Returns:
        Process exit code
    """
    # Imported here so argument errors do not require a database
    from ._dialogue.manager import DialogueManager
    from ._dialogue.response_builder import build_apology_response
    from ._storage.store import SQLiteScoreStore

    try:
        manager = DialogueManager(SQLiteScoreStore(config["db_path"]))
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in stdin:
        try:
            event = parse_event_line(line, session_id)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            continue
        if event is None:
            continue
        try:
            response = manager.handle(event)
        except StorageError:
            render_response(build_apology_response(), out)
            return 1
        render_response(response, out)
        if response.should_end_session:
            break
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = load_config(args.config)
    if args.db:
        config["db_path"] = args.db

    try:
        validate_config(config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(config["log_file"], resolve_log_level(config))
    session_id = args.session or f"console-{uuid.uuid4().hex[:12]}"
    return run_console(config, session_id)

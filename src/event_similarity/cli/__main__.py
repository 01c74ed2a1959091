"""CLI entry point: python -m event_similarity.cli {check,score}"""

import argparse
import json
import sys
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from event_similarity.alerts.formatter import format_alert, warning_message
from event_similarity.config.settings import get_settings
from event_similarity.errors import InvalidArgumentError
from event_similarity.logging_config import configure_logging
from event_similarity.matching.config import load_similarity_config
from event_similarity.matching.models import Candidate
from event_similarity.matching.pipeline import check_duplicates
from event_similarity.matching.scorers import title_similarity

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_DUPLICATE = 3


def _read_candidates(source: str) -> list[Candidate]:
    """Read a JSON list of ``{"event_id", "title"}`` objects from a file or ``-``."""
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidArgumentError(f"Cannot read {source}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, list):
        raise InvalidArgumentError(f"{source} must contain a JSON list of candidates")
    try:
        return [Candidate.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        raise InvalidArgumentError(f"Malformed candidate in {source}: {e}") from e


def run_check(args: argparse.Namespace) -> int:
    """Execute the ``check`` command and print the result as JSON."""
    log = structlog.get_logger()
    config_path = Path(args.config) if args.config else get_settings().similarity_config_path
    try:
        config = load_similarity_config(config_path)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        log.error("invalid_config", path=str(config_path), error=str(e))
        return EXIT_INVALID

    try:
        candidates = _read_candidates(args.candidates)
        result = check_duplicates(
            args.title, candidates, strict=args.strict or None, config=config
        )
    except InvalidArgumentError as e:
        log.error("invalid_input", error=str(e))
        return EXIT_INVALID

    output = result.to_dict()
    output["alert"] = format_alert(result.matches).to_dict()
    output["warning"] = warning_message(result)
    print(json.dumps(output, indent=2, ensure_ascii=False))

    log.info(
        "check_complete",
        candidates=len(candidates),
        assessment=result.assessment.value,
        has_duplicates=result.has_duplicates,
    )
    return EXIT_DUPLICATE if result.has_duplicates else EXIT_OK


def run_score(args: argparse.Namespace) -> int:
    print(f"{title_similarity(args.title_a, args.title_b):.4f}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="event_similarity.cli",
        description="Event similarity CLI",
    )
    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser(
        "check", help="Check a title against candidate events"
    )
    check_parser.add_argument("--title", required=True, help="Title of the new event")
    check_parser.add_argument(
        "--candidates",
        required=True,
        help='JSON file with [{"event_id": ..., "title": ...}], or - for stdin',
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat WARN-level matches as duplicates",
    )
    check_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to similarity.yaml (default: packaged config)",
    )

    score_parser = subparsers.add_parser("score", help="Print the similarity of two titles")
    score_parser.add_argument("title_a")
    score_parser.add_argument("title_b")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    configure_logging(
        json_output=settings.log_json, log_level=settings.log_level, stream=sys.stderr
    )

    if args.command == "check":
        return run_check(args)
    return run_score(args)


if __name__ == "__main__":
    sys.exit(main())

"""CLI commands for checking publication rules and dry-running notifications."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ..adapters.recording_broadcaster import RecordingBroadcaster
from ..config.loader import load_config
from ..config.runtime import get_settings
from ..domain.notification import Notification
from ..errors import ConfigurationError
from ..observability import configure_logging
from ..wiring import build_notifier


def load_notification_from_file(path: Path) -> Notification:
    """Load a notification from a JSON file. Exits on missing file or invalid content."""
    if not path.exists():
        print(f"Error: notification file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)
    try:
        return Notification.model_validate(raw)
    except ValidationError as e:
        print(f"Error: invalid notification: {e}", file=sys.stderr)
        sys.exit(1)


def _load_rules(path: Path):
    try:
        return load_config(path)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def check_rules(path: Path) -> None:
    config = _load_rules(path)
    for resource_type, resource in sorted(config.resources.items()):
        print(
            f"{resource_type}: prefix={resource.prefix!r} name={resource.name!r} "
            f"publications={len(resource.publications)}"
        )


def dry_run(rules_path: Path, notification_path: Path) -> None:
    """Run a notification through the rules and print every broadcast it would make."""
    config = _load_rules(rules_path)
    notification = load_notification_from_file(notification_path)
    notifier = build_notifier(config=config, broadcaster=RecordingBroadcaster())
    dispatched = notifier.notify(notification)
    print(json.dumps([{"topic": d.topic, "event": d.event} for d in dispatched], indent=2))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Pub/sub topic notifier")
    parser.add_argument("--log-level", default=None, help="Override PUBSUB_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Load publication rules and summarise them")
    check_parser.add_argument("--rules", type=Path, default=None, help="Rules JSON file (default: PUBSUB_RULES_PATH)")

    topics_parser = subparsers.add_parser("topics", help="Dry-run a notification and print its topics")
    topics_parser.add_argument("--rules", type=Path, default=None, help="Rules JSON file (default: PUBSUB_RULES_PATH)")
    topics_parser.add_argument("--notification", type=Path, required=True, help="Notification JSON file")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    rules = getattr(args, "rules", None) or Path(settings.rules_path)
    if args.command == "check":
        check_rules(rules)
    elif args.command == "topics":
        dry_run(rules, args.notification)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

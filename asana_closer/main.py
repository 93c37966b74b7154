"""asana-closer entry point.

Runs once per GitHub Actions pull_request event: closes the Asana tasks
linked in the description of a PR merged into main or master.
Usage: asana-closer [--config config.yaml] [--event-path PATH] [--event-name NAME].
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from asana_closer.adapters.asana import AsanaAdapter
from asana_closer.config import load_config
from asana_closer.event import load_event
from asana_closer.logging import CloserLogging
from asana_closer.pipeline import run_pipeline


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI options; event location defaults to the runner env."""
    parser = argparse.ArgumentParser(
        prog="asana-closer",
        description="Close Asana tasks linked in a merged pull request description",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to event payload JSON (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--event-name",
        default=os.environ.get("GITHUB_EVENT_NAME", ""),
        help="Event name (default: $GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv if argv is not None else sys.argv[1:])


def main(argv: list[str] | None = None) -> int:
    """Entry point: 0 unless configuration or the run itself fails."""
    args = parse_args(argv)
    log = logging.getLogger("asana_closer")

    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")

    try:
        config = load_config(config_path)
        CloserLogging(config.logging).setup()
        token = config.require_asana_token()

        if args.check:
            print("Config OK:", config.asana.api_url, ", ".join(config.gate.integration_branches))
            return 0

        event = load_event(args.event_path, args.event_name, log=log)
        adapter = AsanaAdapter(token, api_url=config.asana.api_url, timeout=config.asana.timeout)
        run_pipeline(event, adapter, config.gate.integration_branches, log=log)
    except Exception as e:
        if not logging.root.handlers:
            logging.basicConfig(level=logging.INFO, format="%(message)s")
        log.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

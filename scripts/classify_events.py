#!/usr/bin/env python3
"""
Classify RUM events from an NDJSON file.

Each input line is a JSON object with the event payload and the headers of
the request that carried it:

    {"payload": {"checkpoint": "click", "t": 1234, ...},
     "headers": {"user-agent": "...", "host": "..."}}

Usage:
    # Classify events, writing NDJSON to stdout
    python scripts/classify_events.py --input data/events.ndjson

    # Write to a file and print the client class summary
    python scripts/classify_events.py --input data/events.ndjson \\
        --output data/classified.ndjson --summary

    # Use custom signature tables
    python scripts/classify_events.py --input data/events.ndjson \\
        --bot-signatures config/bots.yaml --spider-signatures config/spiders.yaml
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterator, TextIO

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rum_collector.config import get_settings
from rum_collector.exceptions import ClassificationError
from rum_collector.pipeline import classify_events, setup_logging
from rum_collector.reporting import events_to_frame, summarize_client_classes
from rum_collector.utils import load_bot_signatures, load_spider_signatures

logger = logging.getLogger(__name__)


def read_records(stream: TextIO) -> Iterator[tuple[dict, dict]]:
    """
    Read (payload, headers) pairs from NDJSON lines.

    Malformed lines are logged and skipped.
    """
    for line_number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping line {line_number}: invalid JSON ({e})")
            continue
        if not isinstance(record, dict):
            logger.warning(f"Skipping line {line_number}: not a JSON object")
            continue
        headers = record.get("headers") or {}
        if not isinstance(headers, dict):
            logger.warning(f"Skipping line {line_number}: headers is not a JSON object")
            continue
        yield record.get("payload") or {}, headers


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Classify and anonymize RUM events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="NDJSON file with payload/headers records",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output NDJSON file (default: stdout)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="YAML settings file (default: rum-collector.yaml if present)",
    )
    parser.add_argument(
        "--bot-signatures",
        type=Path,
        help="YAML bot signature table (overrides settings)",
    )
    parser.add_argument(
        "--spider-signatures",
        type=Path,
        help="YAML spider signature list (overrides settings)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the client class summary to stderr",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    settings = get_settings(args.config)
    if args.verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(level=level)

    errors = settings.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    try:
        bot_table = load_bot_signatures(
            args.bot_signatures or settings.bot_signatures_path
        )
        spider_list = load_spider_signatures(
            args.spider_signatures or settings.spider_signatures_path
        )
    except ClassificationError as e:
        logger.error(str(e))
        return 1

    if not args.input.is_file():
        logger.error(f"Input file not found: {args.input}")
        return 1

    output = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    classified = []
    try:
        with open(args.input, encoding="utf-8") as stream:
            for event in classify_events(
                read_records(stream), bot_table=bot_table, spider_list=spider_list
            ):
                output.write(json.dumps(event.to_dict()) + "\n")
                if args.summary:
                    classified.append(event)
    finally:
        if output is not sys.stdout:
            output.close()

    if args.summary:
        summary = summarize_client_classes(events_to_frame(classified))
        print(summary.to_string(index=False), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())

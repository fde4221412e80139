"""
Export the RSVPs of a Campfire event to CSV.

    campfire-export -url https://campfire.nianticlabs.com/discover/meetup/<event-id> -o export.csv
"""

import argparse
import logging
import sys

from .client import CampfireClient
from .config import DEFAULT_OUTPUT, load_settings
from .event import event_id_from_url, get_event
from .exceptions import CampfireError
from .export import export_event
from .logger_config import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campfire-export",
        description="Export the RSVP list of a Campfire event to CSV",
    )
    parser.add_argument("-url", "--url", default="",
                        help="The URL to the campfire event e.g. "
                             "https://campfire.nianticlabs.com/discover/meetup/7d5719a2-e1a2-4d04-9638-e60eb35728bf")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help=f"Output file name (default: {DEFAULT_OUTPUT})")
    parser.add_argument("-debug", "--debug", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url:
        parser.print_help(sys.stderr)
        return 0

    level = logging.DEBUG if args.debug else logging.INFO
    logger = setup_logger("campfire", level=level)

    try:
        settings = load_settings()
        if settings.log_file:
            logger = setup_logger("campfire", level=level, log_file=settings.log_file)

        event_id = event_id_from_url(args.url)
        client = CampfireClient(endpoint=settings.endpoint, timeout=settings.timeout)
        event = get_event(client, event_id)
        logger.debug("Response: %r", event)

        export_event(event, args.output)
    except CampfireError as e:
        logger.error(str(e))
        return 1

    return 0

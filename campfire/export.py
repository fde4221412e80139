import csv
import logging
from typing import Dict, Iterable, List, Tuple

from .exceptions import ExportWriteError
from .models import Event, Member

logger = logging.getLogger(__name__)

HEADER = ("id", "name", "status")

Row = Tuple[str, str, str]


def join_rsvps(event: Event) -> List[Row]:
    """
    Pair each RSVP with its member, in RSVP order.

    The first member edge with a given ID wins. RSVPs without a member are
    skipped with a warning.
    """
    members: Dict[str, Member] = {}
    for edge in event.members:
        members.setdefault(edge.node.id, edge.node)

    rows = []
    for rsvp in event.rsvp_statuses:
        member = members.get(rsvp.user_id)
        if member is None:
            logger.warning("RSVP member %s not found", rsvp.user_id)
            continue
        rows.append((rsvp.user_id, member.display_name, rsvp.rsvp_status))
    return rows


def write_csv(path: str, rows: Iterable[Row]) -> None:
    """Write the header and rows to path, overwriting any existing file."""
    try:
        with open(path, "w", newline="", encoding="utf-8", errors="replace") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            writer.writerows(rows)
    except OSError as e:
        raise ExportWriteError(f"Failed to write CSV {path!r}: {e}") from e


def export_event(event: Event, path: str) -> int:
    write_csv(path, join_rsvps(event))
    logger.info("Wrote %d members to %s", len(event.members), path)
    return len(event.members)

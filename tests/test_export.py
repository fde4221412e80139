import logging

import pytest

from campfire.exceptions import ExportWriteError
from campfire.export import export_event, join_rsvps, write_csv
from campfire.models import Event, Member, MemberEdge, RSVPStatus


def make_event(rsvps, members):
    return Event(
        id="abc-123",
        rsvp_statuses=[RSVPStatus(u, s) for u, s in rsvps],
        members=[MemberEdge(Member(i, n)) for i, n in members],
    )


def test_join_matches_rsvps():
    event = make_event([("u1", "going")], [("u1", "Alice")])
    assert join_rsvps(event) == [("u1", "Alice", "going")]


def test_join_keeps_rsvp_order():
    event = make_event(
        [("u3", "going"), ("u1", "declined"), ("u2", "going")],
        [("u1", "Alice"), ("u2", "Bob"), ("u3", "Carol")],
    )
    assert [row[0] for row in join_rsvps(event)] == ["u3", "u1", "u2"]


def test_join_skips_unknown_member_with_warning(caplog):
    event = make_event([("u2", "going")], [("u1", "Alice")])

    with caplog.at_level(logging.WARNING, logger="campfire"):
        rows = join_rsvps(event)

    assert rows == []
    assert "RSVP member u2 not found" in caplog.text


def test_join_first_member_wins():
    event = make_event([("u1", "going")], [("u1", "Alice"), ("u1", "Impostor")])
    assert join_rsvps(event) == [("u1", "Alice", "going")]


def test_write_csv(output_path):
    write_csv(str(output_path), [("u1", "Alice, Jr.", "going")])
    assert output_path.read_text(encoding="utf-8") == 'id,name,status\nu1,"Alice, Jr.",going\n'


def test_write_csv_overwrites(output_path):
    output_path.write_text("stale content that is longer than the header\n")
    write_csv(str(output_path), [])
    assert output_path.read_text(encoding="utf-8") == "id,name,status\n"


def test_write_csv_unwritable_path(tmp_path):
    with pytest.raises(ExportWriteError):
        write_csv(str(tmp_path / "missing" / "export.csv"), [])


def test_export_event_reports_member_count(output_path, caplog):
    event = make_event([("u2", "going")], [("u1", "Alice"), ("u3", "Carol")])

    with caplog.at_level(logging.INFO, logger="campfire"):
        count = export_event(event, str(output_path))

    assert count == 2
    assert f"Wrote 2 members to {output_path}" in caplog.text
    assert output_path.read_text(encoding="utf-8") == "id,name,status\n"


def test_write_csv_replaces_unencodable_characters(output_path):
    write_csv(str(output_path), [("u1", "A\ud800", "going")])
    assert output_path.read_text(encoding="utf-8") == "id,name,status\nu1,A?,going\n"

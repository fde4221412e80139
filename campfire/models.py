from dataclasses import dataclass, field
from typing import Any, List

from .exceptions import CampfireDecodeError


def _expect(value: Any, kind: type, where: str):
    if not isinstance(value, kind):
        raise CampfireDecodeError(f"expected {kind.__name__} at {where}, got {type(value).__name__}")
    return value


def _field(data: dict, key: str, default, kind: type, where: str):
    """data[key] checked against kind; null or missing gives default."""
    value = data.get(key)
    if value is None:
        return default
    return _expect(value, kind, f"{where}.{key}")


@dataclass(frozen=True)
class Member:
    id: str
    display_name: str

    @classmethod
    def from_dict(cls, data: dict, where: str = "node") -> "Member":
        _expect(data, dict, where)
        return cls(
            id=_field(data, "id", "", str, where),
            display_name=_field(data, "displayName", "", str, where),
        )


@dataclass(frozen=True)
class MemberEdge:
    node: Member

    @classmethod
    def from_dict(cls, data: dict, where: str = "edge") -> "MemberEdge":
        _expect(data, dict, where)
        return cls(node=Member.from_dict(_field(data, "node", {}, dict, where), f"{where}.node"))


@dataclass(frozen=True)
class RSVPStatus:
    user_id: str
    rsvp_status: str

    @classmethod
    def from_dict(cls, data: dict, where: str = "rsvpStatus") -> "RSVPStatus":
        _expect(data, dict, where)
        return cls(
            user_id=_field(data, "userId", "", str, where),
            rsvp_status=_field(data, "rsvpStatus", "", str, where),
        )


@dataclass(frozen=True)
class Event:
    id: str
    rsvp_statuses: List[RSVPStatus] = field(default_factory=list)
    members: List[MemberEdge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, event_id: str = "") -> "Event":
        """
        Build an Event from the `data.event` object of a GraphQL response.
        Null or absent fields decode as empty values; wrong types are rejected.
        """
        _expect(data, dict, "data.event")

        statuses = _field(data, "rsvpStatuses", [], list, "data.event")
        members = _field(data, "members", {}, dict, "data.event")
        edges = _field(members, "edges", [], list, "data.event.members")

        return cls(
            id=_field(data, "id", "", str, "data.event") or event_id,
            rsvp_statuses=[
                RSVPStatus.from_dict(s, f"data.event.rsvpStatuses[{i}]")
                for i, s in enumerate(statuses)
            ],
            members=[
                MemberEdge.from_dict(e, f"data.event.members.edges[{i}]")
                for i, e in enumerate(edges)
            ],
        )

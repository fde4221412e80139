import json
from unittest.mock import Mock

import pytest


def make_response(status_code=200, payload=None, text=None):
    """Fake requests.Response carrying either a JSON payload or raw text."""
    response = Mock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload)
    response.text = text

    def _json():
        return json.loads(text)

    response.json = Mock(side_effect=_json)
    return response


def event_payload(rsvps, members, event_id="abc-123"):
    return {
        "data": {
            "event": {
                "id": event_id,
                "rsvpStatuses": [{"userId": u, "rsvpStatus": s} for u, s in rsvps],
                "members": {
                    "edges": [{"node": {"id": i, "displayName": n}} for i, n in members],
                },
            }
        }
    }


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "export.csv"

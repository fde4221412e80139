from importlib import resources
from urllib.parse import urlparse

from .client import CampfireClient
from .config import PAGE_SIZE
from .exceptions import CampfireDecodeError, InvalidEventURL
from .models import Event


def load_query() -> str:
    """Return the GraphQL query document bundled with the package."""
    return resources.files("campfire").joinpath("query.graphql").read_text(encoding="utf-8")


EVENT_QUERY = load_query()


def event_id_from_url(url: str) -> str:
    """
    Last path segment of an event page URL, e.g.
    https://campfire.nianticlabs.com/discover/meetup/<id> -> <id>.
    Trailing slashes, the query string and the fragment are ignored.
    """
    path = urlparse(url.strip()).path.rstrip("/")
    event_id = path.rsplit("/", 1)[-1]
    if not event_id:
        raise InvalidEventURL(url)
    return event_id


def get_event(client: CampfireClient, event_id: str) -> Event:
    payload, raw = client.query(EVENT_QUERY, {
        "id": event_id,
        "isLoggedIn": False,
        "pageSize": PAGE_SIZE,
    })

    data = payload.get("data")
    if not isinstance(data, dict) or data.get("event") is None:
        raise CampfireDecodeError(f"no event {event_id!r} in response", raw)

    try:
        return Event.from_dict(data["event"], event_id)
    except CampfireDecodeError as e:
        raise CampfireDecodeError(e.reason, raw) from e

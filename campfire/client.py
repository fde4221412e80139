import json
import logging

import requests

from .config import DEFAULT_TIMEOUT, GRAPHQL_ENDPOINT
from .exceptions import (
    CampfireDecodeError,
    CampfireHTTPError,
    CampfireRequestError,
    CampfireTransportError,
)

logger = logging.getLogger(__name__)


class CampfireClient:
    def __init__(self, endpoint: str = GRAPHQL_ENDPOINT, timeout: float = DEFAULT_TIMEOUT):
        """
        endpoint = Niantic social GraphQL endpoint. No authentication is sent.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def query(self, query: str, variables=None):
        """
        POSTs a GraphQL query and returns (payload, raw_text).

        raw_text is the undecoded body, kept so later decoding stages can
        report it when the payload does not have the expected shape.
        """
        try:
            body = json.dumps({"query": query, "variables": variables or {}})
        except (TypeError, ValueError) as e:
            raise CampfireRequestError(f"Failed to encode request body: {e}") from e

        try:
            r = requests.post(self.endpoint, data=body, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise CampfireTransportError(f"Failed to send request: {e}") from e

        if r.status_code != 200:
            raise CampfireHTTPError(r.status_code, r.text)

        raw = r.text
        try:
            payload = r.json()
        except ValueError as e:
            raise CampfireDecodeError(e, raw) from e

        if not isinstance(payload, dict):
            raise CampfireDecodeError(f"expected a JSON object, got {type(payload).__name__}", raw)

        errors = payload.get("errors")
        if isinstance(errors, list):
            for error in errors:
                message = error.get("message") if isinstance(error, dict) else error
                logger.warning("GraphQL error in response: %s", message)
        elif errors is not None:
            logger.warning("GraphQL error in response: %s", errors)

        return payload, raw

class CampfireError(Exception):
    """Base class for every failure of the export pipeline."""


class CampfireConfigError(CampfireError):
    pass


class InvalidEventURL(CampfireError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class CampfireRequestError(CampfireError):
    """The request body could not be built."""


class CampfireTransportError(CampfireError):
    """The HTTP exchange itself failed (DNS, connection, timeout)."""


class CampfireHTTPError(CampfireError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Request failed with status code: {status_code}, response: {body}")


class CampfireDecodeError(CampfireError):
    def __init__(self, reason, raw: str = ""):
        self.reason = reason
        self.raw = raw
        super().__init__(f"Failed to decode response: {reason}, response: {raw}")


class ExportWriteError(CampfireError):
    pass

"""
Error taxonomy shared by the gateway, the stream player and the modal.

Only the gateway and the stream resolution path raise; normalizing and
card building never do. Everything raised here is caught at the point of
user action and turned into a visible notice.
"""


class MatchwatchError(Exception):
    """Base class for all matchwatch errors."""


class GatewayError(MatchwatchError):
    """A network read against the data service failed."""


class FetchTimeoutError(GatewayError, TimeoutError):
    def __init__(self, url: str, seconds: float):
        super().__init__(f"No response from {url} within {seconds:g}s")
        self.url = url
        self.seconds = seconds


class TransportError(GatewayError):
    """The request never produced a usable response (refused, reset, redirect loop...)."""


class HttpError(GatewayError):
    def __init__(self, status_code: int, text: str | None = None):
        super().__init__(text or f"HTTP {status_code}")
        self.status_code = status_code


class ParseError(GatewayError):
    def __init__(self, message: str = "Invalid JSON"):
        super().__init__(message)


class EmptyReferenceError(MatchwatchError):
    def __init__(self, message: str = "No stream URL provided"):
        super().__init__(message)


class NoPlayableLinkError(MatchwatchError):
    def __init__(self, message: str | None = None):
        super().__init__(message or "No playable stream returned by server.")


class InvalidTransition(MatchwatchError):
    pass

# =============================================================================
# core/errors.py  —  Anytype API Error Model
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the two failure types the API client raises on its own:
#
#     AnytypeError         The local server answered with a non-200 status
#                          and a structured error envelope
#                          ({code, message, object?, status?}).
#     ResponseDecodeError  The response body (success or error) could not
#                          be decoded into the expected shape.
#
#   Network failures are NOT wrapped.  They surface as httpx's own
#   exceptions (httpx.ConnectError, httpx.ReadTimeout, ...).  Callers tell
#   the three kinds apart with isinstance(err, AnytypeError).
# =============================================================================

from typing import Any


class ResponseDecodeError(ValueError):
    """The response body was not valid JSON of the expected shape."""


class AnytypeError(Exception):
    """A structured error returned by the Anytype API.

    ``object`` names the resource or domain that failed and ``status``
    mirrors the HTTP status code.  Both are optional on the wire and render
    as an empty string and zero when absent.
    """

    def __init__(self, code: str, message: str, object: str = "", status: int = 0):
        self.code = code
        self.message = message
        self.object = object
        self.status = status
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"The object {self.object} returned an error: {self.message} "
            f"(code: {self.code}, status: {self.status})"
        )

    def __repr__(self) -> str:
        return (
            f"AnytypeError(code={self.code!r}, message={self.message!r}, "
            f"object={self.object!r}, status={self.status!r})"
        )

    @classmethod
    def from_dict(cls, data: Any) -> "AnytypeError":
        """Build an error from a decoded error envelope."""
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"error envelope must be a JSON object, got {type(data).__name__}"
            )
        return cls(
            code=data.get("code") or "",
            message=data.get("message") or "",
            object=data.get("object") or "",
            status=data.get("status") or 0,
        )

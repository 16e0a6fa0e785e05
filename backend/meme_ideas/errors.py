"""
Typed domain errors.

Every error carries a machine-readable ``kind`` and a human-readable
message. Routes never build HTTP errors themselves: the handlers registered
in ``main.py`` render any ``MemeApiError`` as an error envelope with the
status code declared on the class.
"""


class MemeApiError(Exception):
    kind = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class UnauthenticatedError(MemeApiError):
    """No caller identity attached to the request."""

    kind = "UNAUTHORIZED"
    status_code = 401


class NotFoundError(MemeApiError):
    """Entity does not exist, or exists but is hidden from the caller."""

    kind = "NOT_FOUND"
    status_code = 404


class ForbiddenError(MemeApiError):
    """Entity exists and is visible, but the caller may not use it."""

    kind = "FORBIDDEN"
    status_code = 403


class InvalidInputError(MemeApiError):
    """Structurally malformed input."""

    kind = "BAD_REQUEST"
    status_code = 422

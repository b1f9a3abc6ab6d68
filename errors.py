class TrackerError(Exception):
    """Base for errors reported to the client with a status code and message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(TrackerError):
    status_code = 400


class Conflict(TrackerError):
    status_code = 409


class NotFound(TrackerError):
    status_code = 404


def parse_id(raw, message: str) -> int:
    """Parse a path identifier, raising InvalidArgument with message on failure."""
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidArgument(message) from None

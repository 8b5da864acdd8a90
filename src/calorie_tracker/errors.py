"""Error taxonomy shared by services and the API layer."""


class TrackerError(Exception):
    """Base class for errors the API reports with a distinct status."""


class ValidationFailure(TrackerError):
    """Caller-supplied data is missing or unusable."""


class NotFound(TrackerError):
    """An update or delete referenced an id that does not exist."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class ConfigurationError(TrackerError):
    """A required credential or setting is absent."""


class EstimationError(TrackerError):
    """The external model did not produce a usable estimate."""


class MalformedResponse(EstimationError):
    """The model reply is not JSON of the expected shape."""


class UpstreamUnavailable(EstimationError):
    """The model call could not complete (network, auth, quota or timeout)."""

"""Errors raised inside the estimation engine."""


class EstimationError(Exception):
    """Base class for failures recovered by the fallback chain."""


class NoCandidateFound(EstimationError):
    """No usable candidate was returned for a query."""


class CandidateImplausible(EstimationError):
    """Every candidate carried calories outside the plausible range."""


class UpstreamUnavailable(EstimationError):
    """The external nutrition database failed or timed out."""


class PersistenceUnavailable(EstimationError):
    """The persistent food cache could not be reached."""


class EmptyRequestError(ValueError):
    """Both ingredient and measurement were blank."""

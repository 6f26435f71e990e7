class PagescoreError(Exception):
    """Base class for everything raised by pagescore."""


class ConfigurationError(PagescoreError, ValueError):
    """Unsupported device value or malformed audit request."""


class ResourceAcquisitionError(PagescoreError):
    """The browser process could not be launched or never exposed its endpoint."""


class EngineInvocationError(PagescoreError):
    """Lighthouse failed or returned something that is not a report."""


class AuditFailed(PagescoreError):
    """Single error kind surfaced to callers of run_audit.

    The underlying ResourceAcquisitionError / EngineInvocationError is kept
    on ``cause`` (and chained as ``__cause__``) for diagnostics.
    """

    def __init__(self, reason: str, cause: BaseException | None = None):
        super().__init__(reason)
        self.reason = reason
        self.cause = cause

class AnalyticsError(ValueError):
    """Base class for errors raised before a report is produced."""


class InvalidInput(AnalyticsError):
    """The dataset or one of its top-level collections is missing, malformed or empty."""


class InvalidConfiguration(AnalyticsError):
    """A revenue or bonus strategy is missing, not callable, or broke its contract."""

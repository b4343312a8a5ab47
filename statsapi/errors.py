"""Statistics API exceptions.

Every error derives from ``StatisticsError`` (a ``ValueError``), so callers that
only care about bad input can catch ``ValueError``.
"""


class StatisticsError(ValueError):
    """Base class for all errors raised by the statistics service."""


class EmptyDataError(StatisticsError):
    """Raised when a dataset holds no valid numeric values."""

    def __init__(self, message: str = "No valid numeric data provided."):
        super().__init__(message)


class InvalidInputError(StatisticsError):
    """Raised for malformed input: wrong shape, bad arguments, non-finite values."""


class UndefinedStatisticError(StatisticsError):
    """Raised in strict mode when a statistic divides by zero.

    Skewness is undefined when the standard deviation is zero; the coefficient
    of variation is undefined when the mean is zero and the data is dispersed.
    """

    def __init__(self, statistic: str, reason: str):
        self.statistic = statistic
        self.reason = reason
        super().__init__(f"{statistic} is undefined: {reason}")


class TabularParseError(StatisticsError):
    """Raised when a delimited file cannot be parsed."""


class UploadTooLargeError(StatisticsError):
    """Raised when an uploaded file exceeds the configured size limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Uploaded file exceeds the {limit} byte limit")

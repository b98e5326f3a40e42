"""
Exception classes for capacity reporting.

Only argument problems are modelled here. Failures fetching worker
information surface as httpx / pydantic exceptions and are propagated
unchanged by the library layer.
"""


class InvalidArgumentError(Exception):
    """
    Raised when report options are invalid, e.g. more than one worker filter.

    Attributes:
        reason: Human-readable description of the problem.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

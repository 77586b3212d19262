"""Canonical configuration error types.

Analyzers never raise for data problems (bad dates, unknown exercises,
empty windows). The only raising boundary is configuration loading.
"""


class ThresholdConfigError(ValueError):
    """Raised when a threshold override file cannot be used.

    Attributes:
        path: Path of the offending file
        details: List of error detail strings
    """

    def __init__(self, path: str, details: list[str]):
        self.path = path
        self.details = details
        super().__init__(f"{path}: {details}")

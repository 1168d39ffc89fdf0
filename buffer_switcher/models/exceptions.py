"""Exception hierarchy for Buffer Switcher.

The ranking core never raises; these errors only surface at the edges
(configuration files and incoming buffer entries).
"""


class SwitcherError(Exception):
    """Base exception for all Buffer Switcher errors.

    Carries an optional suggestion that is appended to the message
    when the error is shown to the user.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(SwitcherError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass


class SnapshotError(SwitcherError):
    """A buffer entry could not be turned into a snapshot item."""

    pass

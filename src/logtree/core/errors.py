"""Configuration error taxonomy.

Every failure raised while turning a configuration into a writer tree
derives from LogConfigError, so callers of ``init`` can catch a single
type. Runtime write failures are plain OSError and are not listed here.
"""


class LogConfigError(ValueError):
    """Base class for configuration failures."""


class ConfigParseError(LogConfigError):
    """The configuration source is not well formed."""


class ConfigShapeError(LogConfigError):
    """The tree violates the structural rules of a configuration."""


class UnknownWriterTypeError(LogConfigError):
    """A node names a writer type that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown writer type [{name}]")
        self.name = name


class NotAContainerError(LogConfigError):
    """A node has children but its writer cannot hold child writers."""

    def __init__(self, name: str) -> None:
        super().__init__(f"writer type [{name}] does not accept child writers")
        self.name = name


class WriterConstructionError(LogConfigError):
    """A writer constructor rejected its attributes."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"[{name}] {reason}")
        self.name = name
        self.reason = reason


class InvalidFlagError(LogConfigError):
    """A formatting flag token is not recognised."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown flag [{token}]")
        self.token = token

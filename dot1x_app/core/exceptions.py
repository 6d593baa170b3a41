"""Domain errors raised by the configuration generator.

Every error derives from ``Dot1xConfigError`` so callers can catch the
whole family. Configuration-quality problems are never raised; they are
reported as review findings instead.
"""


class Dot1xConfigError(Exception):
    """Base error for the configuration generator."""
    pass


class MissingRequiredFieldError(Dot1xConfigError):
    """A field needed to render a usable configuration is empty."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Required field is missing: {field}")


class EmptyServerPoolError(Dot1xConfigError):
    """No configured RADIUS or RadSec server is available."""

    def __init__(self, message: str = "At least one RADIUS or RadSec server must be configured."):
        super().__init__(message)


class DuplicateTargetError(Dot1xConfigError):
    """The vendor/platform pair is already in the target list."""

    def __init__(self, vendor: str, platform: str):
        self.vendor = vendor
        self.platform = platform
        super().__init__("This vendor and platform combination is already in the list.")


class TargetNotFoundError(Dot1xConfigError):
    """The vendor/platform pair is not in the target list."""

    def __init__(self, vendor: str, platform: str):
        self.vendor = vendor
        self.platform = platform
        super().__init__(f"Target not in list: {vendor}/{platform}")


class ProtectedEntryError(Dot1xConfigError):
    """The primary server cannot be removed while it is the only entry."""

    def __init__(self, kind: str):
        self.kind = kind
        label = "RadSec" if kind == "radsec" else "RADIUS"
        super().__init__(f"Cannot remove the primary {label} server.")


class ServerNotFoundError(Dot1xConfigError):
    """No server entry exists at the requested index."""

    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"No {kind} server at index {index}")


class SessionNotFoundError(Dot1xConfigError):
    """No configuration session exists with the requested id."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")

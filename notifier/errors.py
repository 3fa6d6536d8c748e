from __future__ import annotations
from typing import Optional, Sequence


class RootAlertError(Exception):
    """Base for everything the root activity notifier raises on purpose."""

    kind = "RootAlertError"


class ContractViolation(RootAlertError, ValueError):
    """Inbound event is missing a field or carries one we cannot parse."""

    kind = "ContractViolation"

    def __init__(self, message: str, fields: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class DirectoryUnavailable(RootAlertError):
    """Account alias or caller identity lookup failed."""

    kind = "DirectoryUnavailable"


class ChannelUnavailable(RootAlertError):
    """Publishing the alert failed."""

    kind = "ChannelUnavailable"


class ConfigError(RootAlertError):
    # raised at cold start only
    kind = "ConfigError"

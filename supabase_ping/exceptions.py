"""Exceptions raised while loading targets and pinging them."""

from typing import Optional


class SupabasePingError(Exception):
    """Base exception for supabase-ping."""


class ConfigurationError(SupabasePingError):
    """Missing or malformed SUPABASE_CONFIGS value."""


class TargetValidationError(SupabasePingError):
    """A target is missing its url or key."""


class ProbeTransportError(SupabasePingError):
    """The target could not be reached or answered with a rejected status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code

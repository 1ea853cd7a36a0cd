"""Probe result models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeOutcome(BaseModel):
    """Result of pinging a single target."""

    model_config = ConfigDict(extra="ignore")

    target: str = Field(..., description="The display label of the target")
    url: str = Field("", description="The target base url")
    passed: bool = Field(..., description="Whether the target answered")
    duration_ms: Optional[int] = Field(
        None, description="The round trip time in milliseconds"
    )
    status_code: Optional[int] = Field(
        None, description="The HTTP status, if a response was received"
    )
    reason: str = Field("", description="Why the ping failed")

    @classmethod
    def success(
        cls, target: str, url: str, duration_ms: int, status_code: int
    ) -> "ProbeOutcome":
        """Create a successful outcome."""
        return cls(
            target=target,
            url=url,
            passed=True,
            duration_ms=duration_ms,
            status_code=status_code,
        )

    @classmethod
    def failure(
        cls,
        target: str,
        url: Optional[str],
        reason: str,
        status_code: Optional[int] = None,
    ) -> "ProbeOutcome":
        """Create a failed outcome.

        Args:
            target: The display label of the target.
            url: The target url, which may be missing.
            reason: The error message to report.
            status_code: The rejected HTTP status, if any.

        Returns:
            ProbeOutcome: The failed outcome.
        """
        return cls(
            target=target,
            url=url or "",
            passed=False,
            status_code=status_code,
            reason=reason,
        )

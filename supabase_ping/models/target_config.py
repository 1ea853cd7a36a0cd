"""Target configuration models."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, SecretStr, field_validator

REST_PATH = "/rest/v1/"


class TargetDescriptor(BaseModel):
    """Single database endpoint to ping."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="The display label")
    url: Optional[str] = Field(None, description="The base endpoint address")
    key: Optional[SecretStr] = Field(
        None, description="The API key, sent as apikey header and bearer token"
    )

    _config_error: Optional[str] = PrivateAttr(None)

    @field_validator("name", "url", "key", mode="before")
    @classmethod
    def coerce_scalar(cls, value: Any) -> Any:
        """Render numbers and booleans as text, treating zero and false as unset."""
        if isinstance(value, (bool, int, float)):
            return json.dumps(value) if value else None
        return value

    @classmethod
    def invalid(cls, entry: Any, reason: str) -> "TargetDescriptor":
        """Create a placeholder for a configuration entry that could not be parsed.

        Args:
            entry: The raw decoded entry.
            reason: Why the entry was rejected.

        Returns:
            TargetDescriptor: A target that always fails validation.
        """
        fields = {}
        if isinstance(entry, dict):
            fields = {
                field: entry[field]
                for field in ("name", "url")
                if isinstance(entry.get(field), str)
            }
        target = cls(**fields)
        target._config_error = reason
        return target

    @property
    def config_error(self) -> Optional[str]:
        return self._config_error

    def display_name(self, index: int) -> str:
        """Get the label shown in the report.

        Args:
            index: The zero-based position of the target in the list.

        Returns:
            str: The configured name, or "Database {index+1}" if none is set.
        """
        return self.name or f"Database {index + 1}"

    def is_valid(self) -> bool:
        """Check that both url and key are present and non-empty."""
        if self._config_error:
            return False
        return bool(self.url) and bool(self.key and self.key.get_secret_value())

    def rest_url(self) -> str:
        """Get the REST endpoint probed for reachability.

        Returns:
            str: The url with /rest/v1/ appended.
        """
        return f"{self.url}{REST_PATH}"

    def auth_headers(self) -> Dict[str, str]:
        key = self.key.get_secret_value() if self.key else ""
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
        }

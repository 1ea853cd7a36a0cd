"""Inventory of databases to ping.

Loads target descriptors from the SUPABASE_CONFIGS environment value, a
JSON array of {"name", "url", "key"} objects, optionally pre-populated
from a local .env file.
"""

import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from supabase_ping.exceptions import ConfigurationError
from supabase_ping.models.target_config import TargetDescriptor

CONFIG_ENV_VAR = "SUPABASE_CONFIGS"


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """Load a .env file into the process environment.

    Variables already set in the environment are kept. Failures are not
    raised, the caller decides how to report them.

    Args:
        path: The .env file to load. If None, searches upward from the working directory.

    Returns:
        bool: True if a file was loaded, False if none was found or it could not be read.
    """
    try:
        if path is None:
            path = find_dotenv(usecwd=True)
            if not path:
                return False
        return load_dotenv(dotenv_path=path, override=False)
    except (OSError, UnicodeDecodeError):
        return False


def _parse_entry(entry: Any) -> TargetDescriptor:
    """Validate one configuration entry.

    An entry that is not an object, or has a field that cannot be read as
    text, is kept as an invalid target so it fails on its own at ping time.
    """
    try:
        return TargetDescriptor.model_validate(entry)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        reason = f"{location}: {first['msg']}" if location else first["msg"]
        return TargetDescriptor.invalid(entry, reason)


def parse_target_configs(raw: Optional[str]) -> List[TargetDescriptor]:
    """Decode the SUPABASE_CONFIGS value into target descriptors.

    Args:
        raw: The raw JSON text, or None if the variable is not set.

    Returns:
        List[TargetDescriptor]: The targets in configuration order.

    Raises:
        ConfigurationError: If the value is missing, is not valid JSON, or is
            not a non-empty array.
    """
    if raw is None:
        raise ConfigurationError(f"Missing {CONFIG_ENV_VAR} environment variable")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{CONFIG_ENV_VAR} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not data:
        raise ConfigurationError(
            f"{CONFIG_ENV_VAR} must be a non-empty array of database configurations"
        )

    return [_parse_entry(entry) for entry in data]


class Inventory:
    """Ordered list of targets for one run."""

    def __init__(self, raw_configs: Optional[str]) -> None:
        """Initialize inventory from the raw configuration value.

        Args:
            raw_configs (str, optional): JSON array of target descriptors.

        Raises:
            ConfigurationError: If the value is missing or invalid.
        """
        self.targets: List[TargetDescriptor] = parse_target_configs(raw_configs)

    @classmethod
    def from_environment(cls, env_var: str = CONFIG_ENV_VAR) -> "Inventory":
        """Build the inventory from an environment variable.

        Args:
            env_var (str): Name of the variable holding the JSON array.

        Returns:
            Inventory: The loaded inventory.
        """
        return cls(os.environ.get(env_var))

    def get_all_targets(self) -> List[TargetDescriptor]:
        """Get all configured targets.

        Returns:
            List[TargetDescriptor]: Targets in configuration order.
        """
        return list(self.targets)

    def __len__(self) -> int:
        return len(self.targets)

"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RFC3339KIT_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class KitSettings(BaseSettings):
    """Settings for the rfc3339kit CLI, frozen after construction.

    Attributes:
        json_output: Emit results as JSON.
        quiet: Emit only a status line.
        verbose: Enable debug logging.
        log_json: Emit logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RFC3339KIT_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> KitSettings:
        """Construct settings from CLI invocation.

        Only flags that were switched on are passed as overrides, so an
        unset flag falls through to the environment.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)

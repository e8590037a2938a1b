"""
Runtime configuration: command line values, then environment, then defaults.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "MDPAPER_"

DEFAULTS: Dict[str, Any] = {
    "source_dir": "markdown",
    "output_dir": "output",
    "format": None,
}


class Config:
    """Resolves settings from a CLI dict, ``MDPAPER_*`` variables and defaults."""

    def __init__(self, cli_config: Optional[Dict[str, Any]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.cli_config = {k: v for k, v in (cli_config or {}).items() if v is not None}
        self.environ = os.environ if environ is None else environ

    def get(self, key: str) -> Any:
        if key in self.cli_config:
            return self.cli_config[key]
        env_value = self.environ.get(ENV_PREFIX + key.upper())
        if env_value:
            return env_value
        return DEFAULTS.get(key)

    def get_source_dir(self) -> Path:
        return Path(self.get("source_dir"))

    def get_output_dir(self) -> Path:
        return Path(self.get("output_dir"))

    def get_format(self) -> Optional[str]:
        return self.get("format")

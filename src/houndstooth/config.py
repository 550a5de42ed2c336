"""
Widget library configuration.

Configuration can come from environment variables or from a ``[houndstooth]``
table in a TOML file (for example the project's ``pyproject.toml``).
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_COMMAND_ATTRIBUTE = "data-on-click"


@dataclass(frozen=True)
class WidgetConfig:
    """Configuration for template loading and command rendering."""

    templates_dir: Path | None = None
    command_attribute: str = DEFAULT_COMMAND_ATTRIBUTE
    trim_blocks: bool = True

    @classmethod
    def from_env(cls) -> WidgetConfig:
        """Load configuration from environment variables."""
        templates_dir = os.environ.get("HOUNDSTOOTH_TEMPLATES_DIR")
        return cls(
            templates_dir=Path(templates_dir) if templates_dir else None,
            command_attribute=os.environ.get(
                "HOUNDSTOOTH_COMMAND_ATTRIBUTE", DEFAULT_COMMAND_ATTRIBUTE
            ),
            trim_blocks=os.environ.get("HOUNDSTOOTH_TRIM_BLOCKS", "1") == "1",
        )

    @classmethod
    def from_toml(cls, path: Path) -> WidgetConfig:
        """Load configuration from the ``[houndstooth]`` table of a TOML file.

        Missing file or missing table yields the defaults. A relative
        ``templates_dir`` is resolved against the TOML file's directory.
        """
        if not path.is_file():
            return cls()
        with open(path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
        section = data.get("houndstooth", {})
        # pyproject.toml keeps tool settings under [tool.houndstooth]
        if not section:
            section = data.get("tool", {}).get("houndstooth", {})

        templates_dir = section.get("templates_dir")
        return cls(
            templates_dir=(path.parent / templates_dir) if templates_dir else None,
            command_attribute=section.get("command_attribute", DEFAULT_COMMAND_ATTRIBUTE),
            trim_blocks=bool(section.get("trim_blocks", True)),
        )

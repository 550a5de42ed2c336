"""
Jinja2 template renderer for component templates.

Sets up the Jinja2 environment with the helpers component templates rely on
(class joining, slot rendering, HTML attribute rendering) and template loading
from the package's templates/ directory.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PrefixLoader, select_autoescape
from markupsafe import Markup, escape

from houndstooth.compiler.modifiers import class_names
from houndstooth.config import WidgetConfig

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

# Same rule as Jinja's xmlattr: no whitespace, quotes, or markup delimiters
_INVALID_ATTR_KEY = re.compile(r"[\s/>=\"']")


def _html_attrs_filter(attrs: Mapping[str, Any] | None) -> Markup:
    """Render a mapping as HTML attributes, each preceded by a space.

    ``None`` and ``False`` values are skipped, ``True`` renders a bare boolean
    attribute, everything else is escaped.
    """
    if not attrs:
        return Markup("")
    parts: list[str] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if not key or _INVALID_ATTR_KEY.search(key):
            raise ValueError(f"Invalid character in attribute name: {key!r}")
        if value is True:
            parts.append(f" {escape(key)}")
        else:
            parts.append(f' {escape(key)}="{escape(value)}"')
    return Markup("".join(parts))


def _render_slot(slot: Any) -> Markup:
    """Render the inner blocks of a slot (list of entries or a single entry)."""
    if slot is None:
        return Markup("")
    entries = slot if isinstance(slot, (list, tuple)) else [slot]
    rendered: list[str] = []
    for entry in entries:
        inner = entry.get("inner_block") if isinstance(entry, Mapping) else entry
        if inner is not None:
            rendered.append(escape(inner))
    return Markup("").join(rendered)


def _component(name: str, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> Markup:
    """Render a registered component from inside another template."""
    from houndstooth.compiler.registry import get_component

    return get_component(name)(attrs, **kwargs)


def create_jinja_env(config: WidgetConfig | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        config: Widget configuration. When ``config.templates_dir`` points to
            a directory, its templates take priority over the built-in ones.
            Built-in originals remain accessible via the ``hs://`` prefix
            (e.g. ``{% extends "hs://components/badge.html" %}``).
    """
    config = config or WidgetConfig()
    framework_loader = FileSystemLoader(str(TEMPLATES_DIR))

    if config.templates_dir and config.templates_dir.is_dir():
        project_loader = FileSystemLoader(str(config.templates_dir))
        # Project templates searched first, built-ins as fallback
        main_loader = ChoiceLoader([project_loader, framework_loader])
    else:
        main_loader = ChoiceLoader([framework_loader])

    loader = ChoiceLoader(
        [PrefixLoader({"hs": framework_loader}, delimiter="://"), main_loader]
    )

    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html"]),
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.trim_blocks,
    )

    env.globals["class_names"] = class_names
    env.globals["render_slot"] = _render_slot
    env.globals["component"] = _component
    env.globals["command_attr"] = config.command_attribute

    # Widget state helpers called from the interactive widget templates
    from houndstooth.widgets import state

    env.globals["accordion_section_expanded"] = state.accordion_section_expanded
    env.globals["accordion_trigger_id"] = state.accordion_trigger_id
    env.globals["accordion_section_id"] = state.accordion_section_id
    env.globals["toggle_accordion_section"] = state.toggle_accordion_section
    env.globals["toggle_disclosure"] = state.toggle_disclosure
    env.globals["toggle_pressed"] = state.toggle_pressed

    env.filters["html_attrs"] = _html_attrs_filter

    return env


# Module-level singleton
_env: Environment | None = None
_env_lock = threading.Lock()


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        with _env_lock:
            if _env is None:
                _env = create_jinja_env(WidgetConfig.from_env())
    return _env


def configure_templates(config: WidgetConfig) -> None:
    """Reconfigure the shared Jinja2 environment.

    Call this during app startup, before components are compiled, to enable
    project template overrides or a different command attribute.
    """
    global _env
    env = create_jinja_env(config)
    with _env_lock:
        _env = env


def render_template(
    template_name: str, context: Mapping[str, Any], env: Environment | None = None
) -> Markup:
    """Render a component template.

    Args:
        template_name: Template path relative to templates/.
        context: Template variables.
        env: Environment to use; defaults to the shared one.

    Returns:
        Rendered markup.
    """
    env = env or get_jinja_env()
    template = env.get_template(template_name)
    return Markup(template.render(**context))

"""Render-time collaborators: attribute validation and template rendering."""

from houndstooth.runtime.attribute_schema import AttributeSchema
from houndstooth.runtime.template_renderer import (
    configure_templates,
    create_jinja_env,
    get_jinja_env,
    render_template,
)

__all__ = [
    "AttributeSchema",
    "configure_templates",
    "create_jinja_env",
    "get_jinja_env",
    "render_template",
]

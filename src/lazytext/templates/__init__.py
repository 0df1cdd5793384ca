"""Jinja2 integration.

Templates become lazy renderables that stream into a sink, and lazytext
combinators are available as template filters.
"""

from lazytext.templates.filters import FILTERS, register_filters
from lazytext.templates.renderer import (
    TemplateRenderable,
    create_environment,
    get_environment,
    load_template,
    template_from_string,
)

__all__ = [
    "FILTERS",
    "TemplateRenderable",
    "create_environment",
    "get_environment",
    "load_template",
    "register_filters",
    "template_from_string",
]

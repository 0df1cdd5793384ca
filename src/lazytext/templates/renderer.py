"""Jinja2 templates as lazy renderables.

A ``TemplateRenderable`` holds a compiled template and its context and does
nothing until rendered; rendering streams ``Template.generate()`` chunks into
the sink, so a large template never has to exist as one string. Template
rendering is deterministic, so these renderables repeat like any other pure
renderable (unless the context holds single-use values).
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from jinja2 import BaseLoader, Environment, Template, TemplateError, select_autoescape

from lazytext.core.base import Renderable
from lazytext.core.sinks import Sink
from lazytext.templates.filters import register_filters

logger = logging.getLogger(__name__)

_default_env: Environment | None = None


def create_environment(loader: BaseLoader | None = None, **options: Any) -> Environment:
    """Create a Jinja2 environment with the lazytext filters installed.

    Args:
        loader: Template loader (None for string templates only)
        **options: Extra ``Environment`` options, overriding the defaults

    Returns:
        Configured environment
    """
    settings: dict[str, Any] = {
        "autoescape": select_autoescape(["html", "xml"], default_for_string=False),
        "trim_blocks": True,
        "lstrip_blocks": True,
        "keep_trailing_newline": True,
    }
    settings.update(options)
    env = Environment(loader=loader, **settings)
    register_filters(env)
    return env


def get_environment() -> Environment:
    """Return the shared environment used for string templates."""
    global _default_env
    if _default_env is None:
        _default_env = create_environment()
    return _default_env


class TemplateRenderable(Renderable):
    """A Jinja2 template bound to a context, rendered on demand.

    Usage:
        value = template_from_string("Hello {{ name }}!", name="mundo")
        str(truncate_chars(value, 5))
    """

    def __init__(self, template: Template, context: Mapping[str, Any] | None = None) -> None:
        self.template = template
        self.context = dict(context or {})

    def children(self) -> tuple[Any, ...]:
        return tuple(self.context.values())

    def render(self, sink: Sink) -> None:
        try:
            chunks = self.template.generate(**self.context)
            for chunk in chunks:
                sink.write(chunk)
        except TemplateError as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

    def __deepcopy__(self, memo: dict[int, Any]) -> "TemplateRenderable":
        # Compiled templates are immutable and shared; only the context is copied.
        self._check_duplicable()
        return TemplateRenderable(self.template, copy.deepcopy(self.context, memo))

    def __repr__(self) -> str:
        return f"TemplateRenderable({self.template.name or '<string>'!r})"


def template_from_string(
    source: str,
    env: Environment | None = None,
    **context: Any,
) -> TemplateRenderable:
    """Compile ``source`` and bind it to ``context``.

    Raises:
        ValueError: If the template cannot be compiled
    """
    env = env or get_environment()
    try:
        template = env.from_string(source)
    except TemplateError as e:
        logger.error("Failed to compile template: %s", e)
        raise ValueError(f"Invalid template: {e}") from e
    return TemplateRenderable(template, context)


def load_template(env: Environment, template_name: str, **context: Any) -> TemplateRenderable:
    """Load a named template from ``env``'s loader and bind it to ``context``.

    Raises:
        ValueError: If the template cannot be found or compiled
    """
    try:
        template = env.get_template(template_name)
    except TemplateError as e:
        logger.error("Failed to load template %s: %s", template_name, e)
        raise ValueError(f"Template not found: {template_name}") from e
    return TemplateRenderable(template, context)

"""
Template engine for chat message bodies.

Provides Jinja2-based templates with user customization support.
Templates are loaded from a user templates directory with fallback to
built-in defaults.
"""

from pathlib import Path
from typing import Any, Callable
import logging

from jinja2 import BaseLoader, Environment, TemplateNotFound, pass_context, select_autoescape

logger = logging.getLogger(__name__)


APPLY_DAMAGE_TEMPLATE = "chat/apply-damage.html.j2"


# =============================================================================
# Default Templates (Built-in)
# =============================================================================

DEFAULT_TEMPLATES = {
    # Context: message (localization key), actor, damage, type, from
    APPLY_DAMAGE_TEMPLATE: """<div class="projectfu chat-apply-damage">
  <p>{{ message | format_message }}</p>
</div>
""",
}


# =============================================================================
# Custom Jinja2 Loader
# =============================================================================

class ChatTemplateLoader(BaseLoader):
    """
    Jinja2 loader that checks the user templates directory first,
    then falls back to built-in defaults.
    """

    def __init__(self, templates_dir: Path | None = None):
        self.templates_dir = templates_dir

    def get_source(self, environment: Environment, template: str) -> tuple[str, str | None, Callable[[], bool]]:
        if self.templates_dir:
            user_template = self.templates_dir / template
            if user_template.exists():
                source = user_template.read_text(encoding="utf-8")
                mtime = user_template.stat().st_mtime
                return source, str(user_template), lambda: user_template.stat().st_mtime == mtime

        if template in DEFAULT_TEMPLATES:
            return DEFAULT_TEMPLATES[template], None, lambda: True

        raise TemplateNotFound(template)


# =============================================================================
# Template Engine
# =============================================================================

class TemplateEngine:
    """
    Jinja2-based engine for chat content.

    The `format_message` filter localizes a key and formats it with the
    template context, e.g. "{actor} takes {damage} damage" with
    actor/damage taken from the render parameters.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        localize: Callable[[str], str] | None = None,
    ):
        self.templates_dir = templates_dir
        self._localize = localize or (lambda key: key)
        self._env = Environment(
            loader=ChatTemplateLoader(templates_dir),
            autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["localize"] = lambda key: self._localize(str(key))
        self._env.filters["format_message"] = self._filter_format_message

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file (e.g., "chat/apply-damage.html.j2")
            context: Variables to pass to the template

        Returns:
            Rendered template string
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound:
            logger.error(f"Template not found: {template_name}")
            raise
        except Exception as e:
            logger.error(f"Template render error ({template_name}): {e}")
            raise

    def has_user_template(self, template_name: str) -> bool:
        """Check if a user-customized template exists."""
        if not self.templates_dir:
            return False
        return (self.templates_dir / template_name).exists()

    def list_templates(self) -> dict[str, bool]:
        """Map each built-in template name to whether it is user-customized."""
        return {name: self.has_user_template(name) for name in DEFAULT_TEMPLATES}

    @pass_context
    def _filter_format_message(self, context, key: str) -> str:
        text = self._localize(str(key))
        params = dict(context.get_all())
        try:
            return text.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.warning(f"Could not format message {key!r} with {sorted(params)}")
            return text


def create_template_engine(
    templates_dir: Path | str | None = None,
    localize: Callable[[str], str] | None = None,
) -> TemplateEngine:
    """
    Create a template engine, ignoring a templates directory that does not exist.
    """
    path = Path(templates_dir) if templates_dir else None
    if path is not None and not path.exists():
        path = None
    return TemplateEngine(path, localize)

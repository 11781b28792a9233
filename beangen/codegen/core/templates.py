"""
Jinja2 templates for the file level skeleton of generated sources.

The body of a type is rendered in Python; templates only arrange the
copyright header, package statement, import block and body. Built-in
templates live in memory. A template directory may override any of them
by providing a file of the same name.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import jinja2
from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, StrictUndefined

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Raised when a template cannot be found or rendered."""

    pass


COMPILATION_UNIT = "compilation_unit.java"

JAVA_COMPILATION_UNIT_TEMPLATE = """\
{% if header %}
{{ header | block_comment }}

{% endif %}
{% if package_name %}
package {{ package_name }};

{% endif %}
{% for line in imports %}
{{ line }}
{% endfor %}
{% if imports %}

{% endif %}
{{ body }}
"""

BUILTIN_TEMPLATES: Dict[str, str] = {
    COMPILATION_UNIT: JAVA_COMPILATION_UNIT_TEMPLATE,
}


def block_comment(value: str) -> str:
    """Wrap plain text into a ``/* ... */`` block; existing comments pass through."""
    text = str(value).strip("\n")
    if text.lstrip().startswith("/*"):
        return text

    lines = ["/*"]
    lines.extend(f" * {line}".rstrip() for line in text.split("\n"))
    lines.append(" */")
    return "\n".join(lines)


class TemplateEngine:
    """Jinja2 environment preloaded with the built-in source templates."""

    def __init__(self, template_dir: Optional[Path] = None, builtins: bool = True):
        """
        Args:
            template_dir: Directory whose files take precedence over built-ins
            builtins: Whether the built-in templates are available
        """
        self.template_dir = template_dir
        self._memory = DictLoader(dict(BUILTIN_TEMPLATES) if builtins else {})

        loaders = [self._memory]
        if template_dir is not None:
            if template_dir.is_dir():
                loaders.insert(0, FileSystemLoader(str(template_dir)))
            else:
                logger.warning("Template directory %s does not exist, using built-ins", template_dir)

        # Java is not markup, nothing is escaped
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["block_comment"] = block_comment

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template.

        Raises:
            TemplateError: If the template is missing, fails to parse or
                references an undefined variable
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template, replacing a built-in of the same name."""
        self._memory.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.loader.list_templates()


_default_engine: Optional[TemplateEngine] = None


def get_default_template_engine() -> TemplateEngine:
    """Shared engine holding only the built-in templates."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Return the shared default engine, or a new one reading ``template_dir`` first."""
    if template_dir is None:
        return get_default_template_engine()
    return TemplateEngine(template_dir)

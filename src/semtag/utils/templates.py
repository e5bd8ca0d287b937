"""Template loading and rendering utilities for semtag.

Tag annotation messages are rendered from Jinja2 templates shipped in the
semtag.templates package.
"""

from typing import Any, Optional
from jinja2 import Environment, PackageLoader


def _create_jinja_env() -> Environment:
    """Create and configure the Jinja2 environment.

    Returns:
        Configured Jinja2 Environment.
    """
    return Environment(
        loader=PackageLoader("semtag", "templates"),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


# Global Jinja2 environment (lazy initialization)
_jinja_env: Optional[Environment] = None


def get_jinja_env() -> Environment:
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = _create_jinja_env()
    return _jinja_env


def render_template(name: str, **context: Any) -> str:
    """Render the template `name` (without .jinja2 extension).

    Raises:
        TemplateNotFound: If the template file doesn't exist.
    """
    template = get_jinja_env().get_template(f"{name}.jinja2")
    return template.render(**context)

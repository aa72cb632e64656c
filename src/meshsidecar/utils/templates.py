"""Command template rendering."""

import logging
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError


logger = logging.getLogger(__name__)

_env = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=False)

# Envoy's /server_info reports one of LIVE, DRAINING, PRE_INITIALIZING, INITIALIZING
READINESS_COMMAND = (
    "curl -s http://localhost:{{ admin_port }}/server_info"
    " | grep state | grep -q {{ live_state }}"
)

PRE_STOP_COMMAND = "sleep {{ delay }}"


def render_template(template_str: str, **context: Any) -> str:
    """Render a Jinja2 template string with given context."""
    try:
        return _env.from_string(template_str).render(**context)
    except TemplateError as e:
        logger.error(f"Template rendering error: {e}")
        raise


def shell_command(template_str: str, **context: Any) -> list:
    """Render a template into an ``sh -c`` command list."""
    return ["sh", "-c", render_template(template_str, **context)]

"""Markdown and template rendering."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import markdown as md_lib
from jinja2 import DebugUndefined, Environment, FileSystemLoader, TemplateError

from .errors import BuildError

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def render_markdown(body: str) -> str:
    """Convert a markdown body to an HTML fragment."""
    return md_lib.markdown(body or "", extensions=MARKDOWN_EXTENSIONS, output_format="html")


def create_template_env(templates_dir: Optional[Path] = None) -> Environment:
    """Template environment for page layouts.

    Values are inserted verbatim (page content is already HTML) and unknown
    placeholders are written back as-is so a layout can carry extra slots.
    """
    loader = FileSystemLoader(str(templates_dir)) if templates_dir else None
    return Environment(
        loader=loader,
        autoescape=False,
        undefined=DebugUndefined,
        keep_trailing_newline=True,
    )


def process_template(template: str, variables: Mapping[str, Any], env: Optional[Environment] = None) -> str:
    """Substitute ``{{key}}`` placeholders in a template string."""
    env = env or create_template_env()
    try:
        return env.from_string(template).render(**variables)
    except TemplateError as exc:
        raise BuildError(f"Template rendering failed: {exc}") from exc

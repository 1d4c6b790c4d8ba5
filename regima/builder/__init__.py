"""
Static site builder for the RégimA Zone marketing site.

Turns markdown pages with front matter into HTML through the layout template,
then emits assets, sitemap, robots file and the cognitive knowledge index.
"""

from .config import SiteConfig, SitePaths
from .errors import BuildError, FrontMatterError
from .frontmatter import parse_frontmatter
from .rendering import process_template, render_markdown
from .site_builder import Page, SiteBuilder

__all__ = [
    "SiteConfig",
    "SitePaths",
    "BuildError",
    "FrontMatterError",
    "parse_frontmatter",
    "process_template",
    "render_markdown",
    "Page",
    "SiteBuilder",
]

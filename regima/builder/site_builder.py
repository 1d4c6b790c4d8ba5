"""
Site build pipeline.

Cleans the public directory, copies static assets, renders every markdown
page through `templates/layout.html`, then writes sitemap.xml, robots.txt and
the cognitive knowledge index.
"""
from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import TemplateError

from .cognitive_index import API_DOC_HTML, build_cognitive_index
from .config import SiteConfig, SitePaths
from .errors import BuildError
from .frontmatter import parse_frontmatter
from .rendering import create_template_env, render_markdown
from .robots import render_robots
from .sitemap import collect_entries, render_sitemap

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "layout.html"
INDEX_PAGE = "index.md"


@dataclass
class Page:
    source: str
    front_matter: Dict[str, str]
    body: str
    html: str = ""
    output_path: Optional[Path] = None
    url_path: str = "/"


@dataclass
class BuildResult:
    pages: List[Page] = field(default_factory=list)
    sitemap_path: Optional[Path] = None
    robots_path: Optional[Path] = None
    cognitive_index_path: Optional[Path] = None


class SiteBuilder:
    """Builds the static site from `content/pages` into the public directory."""

    def __init__(
        self,
        paths: Optional[SitePaths] = None,
        config: Optional[SiteConfig] = None,
        build_date: Optional[date] = None,
    ) -> None:
        self.paths = paths or SitePaths.from_env()
        self.config = config or SiteConfig.from_env()
        self.build_date = build_date
        self._env = create_template_env(self.paths.templates_dir)

    @property
    def public_dir(self) -> Path:
        return self.paths.public_dir

    def build(self, clean: bool = True) -> BuildResult:
        logger.info("Building %s into %s", self.config.title, self.public_dir)
        if clean and self.public_dir.exists():
            shutil.rmtree(self.public_dir)
        self.public_dir.mkdir(parents=True, exist_ok=True)

        result = BuildResult()
        self.copy_assets()
        result.pages = self.build_pages()
        result.sitemap_path = self.generate_sitemap(result.pages)
        result.robots_path = self.generate_robots()
        result.cognitive_index_path = self.generate_cognitive_index()
        logger.info("Build completed: %d page(s)", len(result.pages))
        return result

    def copy_assets(self) -> Optional[Path]:
        source = self.paths.assets_dir
        if not source.is_dir():
            logger.warning("Assets directory %s not found; skipping copy", source)
            return None
        target = self.public_dir / "assets"
        logger.info("Copying assets from %s", source)
        shutil.copytree(source, target, dirs_exist_ok=True)
        return target

    def build_pages(self) -> List[Page]:
        pages_dir = self.paths.pages_dir
        if not pages_dir.is_dir():
            raise BuildError(f"Pages directory not found: {pages_dir}")
        logger.info("Building pages from %s", pages_dir)
        return [
            self.build_page(entry.name)
            for entry in sorted(pages_dir.iterdir())
            if entry.is_file() and entry.suffix == ".md"
        ]

    def build_page(self, page_file: str) -> Page:
        source_path = self.paths.pages_dir / page_file
        try:
            content = source_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise BuildError(f"Cannot read page {source_path}: {exc}") from exc

        front_matter, body = parse_frontmatter(content, source=page_file)
        page = Page(source=page_file, front_matter=front_matter, body=body)
        page.html = render_markdown(body)

        variables = {
            "title": front_matter.get("title") or self.config.title,
            "description": front_matter.get("description") or self.config.description,
            "content": page.html,
            "path": front_matter.get("path") or "/",
            "schemaType": front_matter.get("schemaType") or "WebPage",
        }
        html = self._render_layout(variables)

        if page_file == INDEX_PAGE:
            page.output_path = self.public_dir / "index.html"
            page.url_path = "/"
        else:
            name = Path(page_file).stem
            page.output_path = self.public_dir / name / "index.html"
            page.url_path = f"/{name}/"
        page.output_path.parent.mkdir(parents=True, exist_ok=True)
        page.output_path.write_text(html, encoding="utf-8")
        logger.info("Built %s -> %s", page_file, page.output_path.relative_to(self.public_dir))
        return page

    def _render_layout(self, variables: Dict[str, str]) -> str:
        try:
            template = self._env.get_template(LAYOUT_TEMPLATE)
            return template.render(**variables)
        except TemplateError as exc:
            raise BuildError(
                f"Cannot render {self.paths.templates_dir / LAYOUT_TEMPLATE}: {exc}"
            ) from exc

    def generate_sitemap(self, pages: Optional[List[Page]] = None) -> Path:
        logger.info("Generating sitemap")
        entries = collect_entries(page.url_path for page in pages or [])
        sitemap = render_sitemap(self.config.base_url, entries, lastmod=self.build_date)
        target = self.public_dir / "sitemap.xml"
        target.write_text(sitemap, encoding="utf-8")
        return target

    def generate_robots(self) -> Path:
        logger.info("Generating robots.txt")
        target = self.public_dir / "robots.txt"
        target.write_text(render_robots(self.config.base_url), encoding="utf-8")
        return target

    def generate_cognitive_index(self) -> Path:
        logger.info("Generating cognitive knowledge index")
        cognitive_dir = self.public_dir / "cognitive"
        cognitive_dir.mkdir(parents=True, exist_ok=True)

        generated_at = None
        if self.build_date is not None:
            generated_at = datetime(
                self.build_date.year, self.build_date.month, self.build_date.day, tzinfo=timezone.utc
            )
        index = build_cognitive_index(generated_at)
        target = cognitive_dir / "index.json"
        target.write_text(json.dumps(index, indent=2, ensure_ascii=False), encoding="utf-8")
        (cognitive_dir / "api.html").write_text(API_DOC_HTML, encoding="utf-8")
        return target

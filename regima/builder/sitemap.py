"""sitemap.xml generation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from jinja2 import Template

from regima.utils.urls import absolute_url


@dataclass(frozen=True)
class SitemapEntry:
    path: str
    priority: str = "0.5"
    changefreq: str = "monthly"
    section: Optional[str] = None


PRODUCT_CATEGORIES = [
    "anti-ageing",
    "day-preperations",
    "night-preparations",
    "eye-care",
    "in-salon-treatments",
    "pigmentation",
    "problem-skin",
    "repairing",
    "cleansing-toning",
    "classic",
]

PORTFOLIO_ITEMS = [
    "zone-scar-repair-forte-serum",
    "epi-genes-xpress",
    "zone-quantum-elast-collagen-revival",
]

SITEMAP_ENTRIES: List[SitemapEntry] = [
    SitemapEntry("/", "1.0", "weekly", section="Homepage"),
    SitemapEntry("/products/", "0.9", "weekly", section="Main Pages"),
    SitemapEntry("/about-us/", "0.8", "monthly"),
    SitemapEntry("/contact-us/", "0.7", "monthly"),
    SitemapEntry("/testimonials/", "0.7", "weekly"),
    SitemapEntry("/faqs/", "0.6", "monthly"),
    SitemapEntry("/blog/", "0.8", "daily"),
]
SITEMAP_ENTRIES += [
    SitemapEntry(f"/products/{slug}/", "0.8", "weekly", section="Product Categories" if i == 0 else None)
    for i, slug in enumerate(PRODUCT_CATEGORIES)
]
SITEMAP_ENTRIES += [
    SitemapEntry(f"/portfolio/{slug}/", "0.7", "monthly", section="Portfolio Items" if i == 0 else None)
    for i, slug in enumerate(PORTFOLIO_ITEMS)
]
SITEMAP_ENTRIES += [
    SitemapEntry("/cognitive/knowledge-graph/", "0.5", "daily", section="Cognitive Architecture Pages"),
    SitemapEntry("/cognitive/api/", "0.4", "weekly"),
]

SITEMAP_TEMPLATE = Template(
    """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"
        xmlns:image="http://www.google.com/schemas/sitemap-image/1.1">
{%- for entry in entries %}
{%- if entry.section %}
    <!-- {{ entry.section }} -->
{%- endif %}
    <url>
        <loc>{{ entry.loc | e }}</loc>
        <lastmod>{{ lastmod }}</lastmod>
        <priority>{{ entry.priority }}</priority>
        <changefreq>{{ entry.changefreq }}</changefreq>
    </url>
{%- endfor %}
</urlset>
"""
)


def collect_entries(extra_paths: Iterable[str] = ()) -> List[SitemapEntry]:
    """Catalogue entries followed by any extra path the catalogue lacks."""
    entries = list(SITEMAP_ENTRIES)
    known = {entry.path for entry in entries}
    added_section = False
    for path in extra_paths:
        if path in known:
            continue
        known.add(path)
        entries.append(SitemapEntry(path, section=None if added_section else "Additional Pages"))
        added_section = True
    return entries


def render_sitemap(base_url: str, entries: Iterable[SitemapEntry], lastmod: Optional[date] = None) -> str:
    lastmod_text = (lastmod or date.today()).isoformat()
    rows = [
        {
            "loc": absolute_url(base_url, entry.path),
            "priority": entry.priority,
            "changefreq": entry.changefreq,
            "section": entry.section,
        }
        for entry in entries
    ]
    return SITEMAP_TEMPLATE.render(entries=rows, lastmod=lastmod_text)

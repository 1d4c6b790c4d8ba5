"""robots.txt generation."""

from regima.utils.urls import absolute_url

AI_CRAWLERS = ["GPTBot", "ChatGPT-User", "Google-Extended"]

DISALLOWED_PATHS = [
    "/admin/",
    "/wp-admin/",
    "/wp-includes/",
]

TEMP_PATTERNS = [
    "/tmp/",
    "/*.tmp$",
    "/*.temp$",
]


def render_robots(base_url: str) -> str:
    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        "# Sitemap",
        f"Sitemap: {absolute_url(base_url, '/sitemap.xml')}",
        "",
        "# Cognitive Architecture - Allow crawling for knowledge extraction",
        "Allow: /cognitive/",
        "Allow: /assets/js/cognitive-layer.js",
        "",
        "# Product images for visual AI",
        "Allow: /assets/images/products/",
        "Allow: /assets/images/categories/",
        "",
        "# Crawl delay for cognitive processing",
        "Crawl-delay: 1",
        "",
        "# Special directives for AI/ML crawlers",
    ]
    for agent in AI_CRAWLERS:
        lines += [f"User-agent: {agent}", "Allow: /", ""]
    lines.append("# Block admin areas")
    lines += [f"Disallow: {path}" for path in DISALLOWED_PATHS]
    lines += ["", "# Block temporary files"]
    lines += [f"Disallow: {pattern}" for pattern in TEMP_PATTERNS]
    return "\n".join(lines) + "\n"

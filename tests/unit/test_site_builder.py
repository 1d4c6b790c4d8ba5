import json
from datetime import date

import pytest

from regima.builder import BuildError, SiteBuilder, SiteConfig, SitePaths

BUILD_DATE = date(2024, 1, 2)


@pytest.fixture
def builder(site_root):
    return SiteBuilder(
        paths=SitePaths(root=site_root),
        config=SiteConfig(base_url="https://example.test", title="Test Zone", description="Default description"),
        build_date=BUILD_DATE,
    )


def test_build_writes_pages_to_clean_urls(builder):
    result = builder.build()
    public = builder.public_dir

    assert [p.url_path for p in result.pages] == ["/", "/products/"]
    assert (public / "index.html").is_file()
    assert (public / "products" / "index.html").is_file()
    assert not (public / "products.html").exists()


def test_page_variables_are_substituted(builder):
    builder.build()
    home = (builder.public_dir / "index.html").read_text(encoding="utf-8")
    assert "<title>Home</title>" in home
    assert 'content="Welcome home"' in home
    assert '"@type": "WebSite"' in home
    assert "<h1>Welcome</h1>" in home
    assert "{{" not in home


def test_missing_front_matter_falls_back_to_site_defaults(builder):
    builder.build()
    products = (builder.public_dir / "products" / "index.html").read_text(encoding="utf-8")
    assert "<title>Products</title>" in products
    assert 'content="Default description"' in products
    assert '"@type": "WebPage"' in products
    assert "https://regima.site/products/" in products


def test_page_without_front_matter_uses_title_and_root_path(builder, site_root):
    (site_root / "content" / "pages" / "faqs.md").write_text("# FAQs\n", encoding="utf-8")
    builder.build()
    faqs = (builder.public_dir / "faqs" / "index.html").read_text(encoding="utf-8")
    assert "<title>Test Zone</title>" in faqs
    assert 'href="https://regima.site/"' in faqs


def test_non_markdown_files_are_ignored(builder, site_root):
    (site_root / "content" / "pages" / "notes.txt").write_text("ignore me", encoding="utf-8")
    result = builder.build()
    assert all(p.source.endswith(".md") for p in result.pages)
    assert not (builder.public_dir / "notes").exists()


def test_assets_are_copied(builder):
    builder.build()
    assert (builder.public_dir / "assets" / "css" / "main.css").read_text(encoding="utf-8") == "body { margin: 0; }\n"


def test_missing_assets_directory_is_not_fatal(builder, site_root, caplog):
    import shutil

    shutil.rmtree(site_root / "assets")
    result = builder.build()
    assert len(result.pages) == 2
    assert not (builder.public_dir / "assets").exists()
    assert any("Assets directory" in rec.message for rec in caplog.records)


def test_clean_build_removes_stale_output(builder):
    builder.public_dir.mkdir(parents=True)
    stale = builder.public_dir / "stale.html"
    stale.write_text("old", encoding="utf-8")
    builder.build()
    assert not stale.exists()


def test_build_without_clean_keeps_existing_output(builder):
    builder.public_dir.mkdir(parents=True)
    kept = builder.public_dir / "kept.html"
    kept.write_text("old", encoding="utf-8")
    builder.build(clean=False)
    assert kept.exists()


def test_missing_pages_directory_raises(tmp_path):
    (tmp_path / "templates").mkdir()
    b = SiteBuilder(paths=SitePaths(root=tmp_path), config=SiteConfig())
    with pytest.raises(BuildError):
        b.build()


def test_missing_layout_raises(builder, site_root):
    (site_root / "templates" / "layout.html").unlink()
    with pytest.raises(BuildError):
        builder.build()


def test_sitemap_lists_catalogue_and_built_pages(builder, site_root):
    (site_root / "content" / "pages" / "press.md").write_text("# Press\n", encoding="utf-8")
    builder.build()
    sitemap = (builder.public_dir / "sitemap.xml").read_text(encoding="utf-8")

    assert sitemap.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<loc>https://example.test/</loc>" in sitemap
    assert "<loc>https://example.test/products/day-preperations/</loc>" in sitemap
    assert "<loc>https://example.test/portfolio/epi-genes-xpress/</loc>" in sitemap
    assert "<lastmod>2024-01-02</lastmod>" in sitemap
    assert "<!-- Additional Pages -->" in sitemap
    assert "<loc>https://example.test/press/</loc>" in sitemap
    # /products/ is already catalogued
    assert sitemap.count("<loc>https://example.test/products/</loc>") == 1


def test_robots_points_at_sitemap(builder):
    builder.build()
    robots = (builder.public_dir / "robots.txt").read_text(encoding="utf-8")
    assert robots.startswith("User-agent: *\nAllow: /\n")
    assert "Sitemap: https://example.test/sitemap.xml" in robots
    assert "User-agent: GPTBot" in robots
    assert "Disallow: /wp-admin/" in robots


def test_cognitive_index_is_written(builder):
    builder.build()
    cognitive = builder.public_dir / "cognitive"
    index = json.loads((cognitive / "index.json").read_text(encoding="utf-8"))

    assert index["version"] == "1.0"
    assert index["architecture"] == "SkinTwin"
    assert index["generatedAt"].startswith("2024-01-02")
    assert "retinol" in index["knowledge"]["entities"]
    assert "day-preparations" in index["knowledge"]["categories"]
    assert len(index["inference"]["rules"]) == 3
    assert (cognitive / "api.html").read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

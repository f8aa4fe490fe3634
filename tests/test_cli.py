"""Tests for the blog-content command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from blog_content.cli import app

runner = CliRunner()


@pytest.fixture
def posts_file(tmp_path):
    rows = [
        {
            "id": "1",
            "slug": "python-tips",
            "title": "Python Tips",
            "content": "Some **tips**",
            "tags": ["python", "tips"],
            "published_at": "2024-05-03T08:00:00Z",
            "featured": True,
        },
        {
            "id": "2",
            "slug": "web-notes",
            "title": "Web Notes",
            "excerpt": "Notes about the web",
            "content": "",
            "tags": ["web"],
            "published_at": "2024-05-01T08:00:00Z",
        },
        {
            "id": "3",
            "slug": "draft",
            "title": "Draft",
            "content": "",
            "published_at": "2024-05-02T08:00:00Z",
            "status": "draft",
        },
    ]
    path = tmp_path / "posts.json"
    path.write_text(json.dumps({"posts": rows}), encoding="utf-8")
    return path


def test_render_writes_output_file(tmp_path):
    source = tmp_path / "post.md"
    source.write_text("## Hello\n\n**bold**", encoding="utf-8")
    target = tmp_path / "post.html"

    result = runner.invoke(
        app,
        ["render", "-i", str(source), "-o", str(target), "--no-wrap", "--log-level", "WARNING"],
    )

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == (
        '<h2 class="text-2xl font-bold mt-8 mb-4">Hello</h2></p><p class="mb-4">'
        '<strong class="font-semibold">bold</strong>'
    )


def test_render_reads_stdin_and_wraps():
    result = runner.invoke(
        app,
        ["render", "--class-name", "mt-4", "--show-dialect", "--log-level", "WARNING"],
        input="*hi*",
    )

    assert result.exit_code == 0
    assert "Dialect: plain" in result.output
    assert '<em class="italic">hi</em></div>' in result.output
    assert 'mt-4">' in result.output


def test_search_filters_by_tag(posts_file):
    result = runner.invoke(app, ["search", "-i", str(posts_file), "--tag", "web"])

    assert result.exit_code == 0
    assert "web-notes" in result.output
    assert "python-tips" not in result.output
    assert "Found 1 articles (total 2)" in result.output


def test_search_term_matches_excerpt(posts_file):
    result = runner.invoke(app, ["search", "-i", str(posts_file), "--term", "ABOUT THE"])

    assert result.exit_code == 0
    assert "web-notes" in result.output
    assert "Found 1 articles (total 2)" in result.output


def test_tags_lists_vocabulary(posts_file):
    result = runner.invoke(app, ["tags", "-i", str(posts_file)])

    assert result.exit_code == 0
    assert result.output.split() == ["python", "tips", "web"]


def test_stats_counts_published_posts(posts_file):
    result = runner.invoke(app, ["stats", "-i", str(posts_file)])

    assert result.exit_code == 0
    assert "Posts: 2" in result.output
    assert "Tags: 3" in result.output
    assert "Featured: Python Tips (python-tips)" in result.output


def test_search_reports_invalid_export(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"rows": []}), encoding="utf-8")

    result = runner.invoke(app, ["search", "-i", str(path)])

    assert result.exit_code == 1
    assert "Failed to load" in result.output

"""
Command-line interface for blog content tooling.

Uses Typer to render stored article bodies and to search exported post rows
the same way the article list does.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config
from .core.types import Article, SearchPredicate
from .input.json_parser import load_articles
from .render import classify, render, wrap_content
from .search import (
    blog_stats,
    collect_tags,
    featured_articles,
    filter_articles,
    result_summary,
    sort_articles,
)
from .utils.logging import log_event, setup_logging, truncate_text

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(config: Path | None, log_level: str | None) -> tuple[AppConfig, logging.Logger]:
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    logger = setup_logging(cfg.logging, Path.cwd())
    return cfg, logger


def _load(input: Path) -> list[Article]:
    try:
        return load_articles(input)
    except (OSError, ValueError) as exc:
        console.print(f"Failed to load {input}: {exc}", style="red", markup=False)
        raise typer.Exit(code=1) from exc


@app.command("render")
def render_command(
    input: Path | None = typer.Option(None, "--input", "-i", exists=True, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    wrap: bool | None = typer.Option(None, "--wrap/--no-wrap", help="Wrap in the prose container."),
    class_name: str | None = typer.Option(None, "--class-name", help="Extra container classes."),
    show_dialect: bool = typer.Option(False, "--show-dialect", help="Print the detected dialect."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Render a stored article body to HTML.

    Reads the body from --input, or from stdin when no file is given, and
    writes the markup to --output or stdout.
    """
    cfg, logger = _prepare(config, log_level)
    if wrap is not None:
        cfg.render.wrap = wrap
    if class_name is not None:
        cfg.render.class_name = class_name

    raw = input.read_text(encoding="utf-8") if input else sys.stdin.read()
    dialect = classify(raw)
    html = render(raw)
    if cfg.render.wrap:
        html = wrap_content(html, cfg.render.class_name)

    log_event(logger, "content_rendered", dialect=dialect, preview=truncate_text(html))

    if show_dialect:
        console.print(f"Dialect: {dialect}", style="bold")
    if output:
        output.write_text(html, encoding="utf-8")
        console.print(f"Rendered content written: {output}")
    else:
        typer.echo(html)


@app.command()
def search(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    term: str = typer.Option("", "--term", "-t", help="Case-insensitive search text."),
    tag: list[str] = typer.Option([], "--tag", help="Tag filter, repeatable (any-of)."),
    author: str | None = typer.Option(None, "--author", help="Exact author match."),
    featured: bool | None = typer.Option(None, "--featured/--not-featured"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Search exported posts by text and tags."""
    cfg, logger = _prepare(config, log_level)
    articles = _load(input)
    predicate = SearchPredicate(term=term, tags=frozenset(tag), author=author, featured=featured)

    try:
        ordered = sort_articles(articles, cfg.search.order_by, cfg.search.order_direction)
    except ValueError as exc:
        console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc
    matches = filter_articles(ordered, predicate)
    log_event(logger, "articles_filtered", total=len(articles), matches=len(matches))

    table = Table(title="Articles")
    table.add_column("Published")
    table.add_column("Title", style="bold")
    table.add_column("Slug")
    table.add_column("Tags")
    for article in matches:
        table.add_row(
            article.published_at.strftime("%Y-%m-%d"),
            article.title,
            article.slug,
            ", ".join(article.tags),
        )
    console.print(table)
    console.print(result_summary(len(matches), len(articles), predicate))
    if cfg.search.show_tags:
        console.print(f"Tags: {', '.join(collect_tags(articles))}")


@app.command()
def tags(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """List every tag used by the exported posts."""
    _prepare(config, log_level)
    for name in collect_tags(_load(input)):
        typer.echo(name)


@app.command()
def stats(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Show post and tag counts plus the featured posts."""
    cfg, _ = _prepare(config, log_level)
    articles = _load(input)
    summary = blog_stats(articles)
    console.print(f"Posts: {summary.total_posts}")
    console.print(f"Tags: {summary.total_tags}")
    for article in featured_articles(articles, cfg.search.featured_limit):
        console.print(f"Featured: {article.title} ({article.slug})")


if __name__ == "__main__":
    app()

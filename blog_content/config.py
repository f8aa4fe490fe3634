"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- RenderConfig: Article body container settings
- SearchConfig: List ordering and featured selection
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Configuration is always built explicitly and passed to the code that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class RenderConfig:
    """Configuration for article body rendering.

    Attributes:
        wrap: Whether rendered bodies are wrapped in the prose container
        class_name: Extra CSS classes appended to the container
    """

    wrap: bool = True
    class_name: str = ""


@dataclass
class SearchConfig:
    """Configuration for the article list.

    Attributes:
        order_by: Sort key ("published_at", "updated_at" or "title")
        order_direction: "asc" or "desc"
        featured_limit: Maximum number of featured articles to list
        show_tags: Whether the tag vocabulary is shown next to results
    """

    order_by: str = "published_at"
    order_direction: str = "desc"
    featured_limit: int = 3
    show_tags: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "blog-content.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    render: RenderConfig = field(default_factory=RenderConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "render": {
            "wrap": cfg.render.wrap,
            "class_name": cfg.render.class_name,
        },
        "search": {
            "order_by": cfg.search.order_by,
            "order_direction": cfg.search.order_direction,
            "featured_limit": cfg.search.featured_limit,
            "show_tags": cfg.search.show_tags,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        render=RenderConfig(**data["render"]),
        search=SearchConfig(**data["search"]),
        logging=LoggingConfig(**data["logging"]),
    )

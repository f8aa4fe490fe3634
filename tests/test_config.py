"""Tests for YAML configuration loading."""

from blog_content.config import AppConfig, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)

    assert cfg == AppConfig()
    assert cfg.render.wrap is True
    assert cfg.search.order_by == "published_at"
    assert cfg.logging.level == "INFO"


def test_load_config_returns_independent_instances():
    first = load_config(None)
    first.logging.level = "DEBUG"

    assert load_config(None).logging.level == "INFO"


def test_load_config_merges_sections_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "render:\n"
        "  class_name: mt-8\n"
        "search:\n"
        "  order_by: title\n"
        "  order_direction: asc\n"
        "unknown:\n"
        "  key: value\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.render.class_name == "mt-8"
    assert cfg.render.wrap is True
    assert cfg.search.order_by == "title"
    assert cfg.search.order_direction == "asc"
    assert cfg.search.featured_limit == 3
    assert cfg.logging == AppConfig().logging


def test_load_config_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()

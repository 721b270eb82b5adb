"""Tests for configuration loading."""

import pytest

from oneassist.config import AssistConfig, ContextLimits, RoutingConfig, _find_repo_root

ENV_VARS = (
    "ONEASSIST_CONFIDENCE_FLOOR",
    "ONEASSIST_FALLBACK_CONFIDENCE",
    "ONEASSIST_MAX_CAMPAIGNS",
    "ONEASSIST_MAX_BREAKDOWN_ROWS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_config(root, text):
    config_dir = root / ".oneassist"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(text)


def test_defaults(tmp_path):
    config = AssistConfig.from_env(repo_root=tmp_path)

    assert config.routing == RoutingConfig()
    assert config.routing.confidence_floor == 0.1
    assert config.routing.fallback_confidence == 0.5
    assert config.routing.tutoring_confidence == 1.0
    assert config.context.max_campaigns == 5
    assert config.context.max_regions == 3


def test_toml_values(tmp_path):
    _write_config(
        tmp_path,
        "[routing]\nconfidence_floor = 0.2\n\n[context]\nmax_campaigns = 3\nmax_pages = 2\n",
    )
    config = AssistConfig.from_env(repo_root=tmp_path)

    assert config.routing.confidence_floor == 0.2
    assert config.context.max_campaigns == 3
    assert config.context.max_pages == 2
    assert config.context.max_sources == 5


def test_env_overrides_toml(tmp_path, monkeypatch):
    _write_config(tmp_path, "[routing]\nconfidence_floor = 0.2\n")
    monkeypatch.setenv("ONEASSIST_CONFIDENCE_FLOOR", "0.3")
    monkeypatch.setenv("ONEASSIST_MAX_CAMPAIGNS", "7")

    config = AssistConfig.from_env(repo_root=tmp_path)

    assert config.routing.confidence_floor == 0.3
    assert config.context.max_campaigns == 7


def test_breakdown_rows_env_leaves_campaigns(tmp_path, monkeypatch):
    monkeypatch.setenv("ONEASSIST_MAX_BREAKDOWN_ROWS", "2")

    limits = AssistConfig.from_env(repo_root=tmp_path).context

    assert limits.max_sources == 2
    assert limits.max_demographics == 2
    assert limits.max_regions == 2
    assert limits.max_campaigns == 5
    assert limits.max_campaign_groups == 5


def test_malformed_toml_ignored(tmp_path):
    _write_config(tmp_path, "[routing\nconfidence_floor = ")

    assert AssistConfig.from_env(repo_root=tmp_path) == AssistConfig()


def test_wrong_type_raises(tmp_path):
    _write_config(tmp_path, '[context]\nmax_campaigns = "lots"\n')

    with pytest.raises(ValueError, match="Invalid config"):
        AssistConfig.from_env(repo_root=tmp_path)


def test_bad_env_value_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("ONEASSIST_FALLBACK_CONFIDENCE", "high")

    with pytest.raises(ValueError, match="Invalid config"):
        AssistConfig.from_env(repo_root=tmp_path)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        RoutingConfig(confidence_floor=1.5)


def test_with_breakdown_rows_returns_copy():
    limits = ContextLimits()
    smaller = limits.with_breakdown_rows(1)

    assert limits.max_cities == 5
    assert smaller.max_cities == 1


def test_find_repo_root(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert _find_repo_root(nested) == tmp_path

"""Configuration management for OneAssist."""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11


def _find_repo_root(start_dir: Path) -> Path:
    """Find repository root by walking upward looking for .git or pyproject.toml."""
    current_dir = start_dir

    while True:
        if (current_dir / ".git").exists() or (current_dir / "pyproject.toml").exists():
            return current_dir

        parent_dir = current_dir.parent

        # Stop if we reach filesystem root
        if parent_dir == current_dir:
            return start_dir

        current_dir = parent_dir


def _load_repo_config_data(repo_root: Path) -> Optional[dict]:
    """Load repo config data from .oneassist/config.toml if it exists."""
    config_file = repo_root / ".oneassist" / "config.toml"

    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        # If config file is malformed, ignore it
        return None


def _section(data: Optional[dict], name: str) -> dict:
    if not isinstance(data, dict):
        return {}
    section = data.get(name)
    return section if isinstance(section, dict) else {}


def _as_int(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid config: {name} must be an int")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"Invalid config: {name} must be an int")


def _as_float(value: Any, *, name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid config: {name} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ValueError(f"Invalid config: {name} must be a number")


class RoutingConfig(BaseModel):
    """Thresholds for keyword routing.

    The defaults were tuned against real queries; change them only with
    product guidance.
    """

    confidence_floor: float = Field(default=0.1, ge=0.0, le=1.0)
    fallback_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    tutoring_confidence: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}


class ContextLimits(BaseModel):
    """Row caps for each list emitted into the platform context."""

    max_campaigns: int = Field(default=5, ge=0)
    max_campaign_groups: int = Field(default=5, ge=0)
    max_sources: int = Field(default=5, ge=0)
    max_devices: int = Field(default=5, ge=0)
    max_pages: int = Field(default=5, ge=0)
    max_countries: int = Field(default=5, ge=0)
    max_cities: int = Field(default=5, ge=0)
    max_regions: int = Field(default=3, ge=0)
    max_demographics: int = Field(default=5, ge=0)
    max_geography: int = Field(default=5, ge=0)
    max_realtime_devices: int = Field(default=3, ge=0)

    model_config = {"frozen": True}

    def with_breakdown_rows(self, rows: int) -> "ContextLimits":
        """Copy with every dimensional cap (not campaigns) set to ``rows``."""
        return self.model_copy(
            update={
                name: rows
                for name in type(self).model_fields
                if name not in ("max_campaigns", "max_campaign_groups")
            }
        )


class AssistConfig(BaseModel):
    """Configuration for routing and context assembly."""

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    context: ContextLimits = Field(default_factory=ContextLimits)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, repo_root: Optional[Path] = None) -> "AssistConfig":
        """Load configuration with precedence env > .oneassist/config.toml > defaults.

        Args:
            repo_root: Directory holding .oneassist/config.toml (default: walk up from CWD)

        Raises:
            ValueError: If a configured value has the wrong type
        """
        root = repo_root if repo_root is not None else _find_repo_root(Path.cwd())
        data = _load_repo_config_data(root)
        routing_section = _section(data, "routing")
        context_section = _section(data, "context")

        floor = os.environ.get(
            "ONEASSIST_CONFIDENCE_FLOOR", routing_section.get("confidence_floor", 0.1)
        )
        fallback = os.environ.get(
            "ONEASSIST_FALLBACK_CONFIDENCE", routing_section.get("fallback_confidence", 0.5)
        )
        routing = RoutingConfig(
            confidence_floor=_as_float(floor, name="[routing].confidence_floor"),
            fallback_confidence=_as_float(fallback, name="[routing].fallback_confidence"),
        )

        limits = ContextLimits(
            **{
                name: _as_int(value, name=f"[context].{name}")
                for name, value in context_section.items()
                if name in ContextLimits.model_fields
            }
        )
        breakdown_rows = os.environ.get("ONEASSIST_MAX_BREAKDOWN_ROWS")
        if breakdown_rows:
            limits = limits.with_breakdown_rows(
                _as_int(breakdown_rows, name="ONEASSIST_MAX_BREAKDOWN_ROWS")
            )
        max_campaigns = os.environ.get("ONEASSIST_MAX_CAMPAIGNS")
        if max_campaigns:
            limits = limits.model_copy(
                update={"max_campaigns": _as_int(max_campaigns, name="ONEASSIST_MAX_CAMPAIGNS")}
            )

        return cls(routing=routing, context=limits)

"""Randomizer configuration — defaults and the JSON config file.

The effective settings live in ``configs/randomizer.json`` at the
repository root.  Any key left out of the file falls back to the
dataclass default, so an empty object ``{}`` is a valid config.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from functools import lru_cache
from pathlib import Path

from randomizer.placer.models import PlacementConfig


CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "randomizer.json"


class ConfigError(ValueError):
    """Raised for an unreadable or out-of-range configuration."""


@dataclass(frozen=True)
class RandomizerConfig:
    """Placement and resize policy.

    Distances share the host's unit (pixels for a web page).
    """

    spacing: float = 75
    """Extra clearance required around every obstacle."""

    tries: int = 25
    """Maximum number of resamples per item before giving up."""

    delay_ms: float = 500
    """Quiet period after the last resize before re-placing items."""

    def __post_init__(self) -> None:
        if isinstance(self.spacing, bool) or not isinstance(self.spacing, (int, float)):
            raise ConfigError(f"spacing must be a number, got {self.spacing!r}")
        if self.spacing < 0:
            raise ConfigError(f"spacing must be >= 0, got {self.spacing}")
        if isinstance(self.tries, bool) or not isinstance(self.tries, int) or self.tries < 0:
            raise ConfigError(f"tries must be a non-negative integer, got {self.tries!r}")
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, (int, float)):
            raise ConfigError(f"delay_ms must be a number, got {self.delay_ms!r}")
        if self.delay_ms < 0:
            raise ConfigError(f"delay_ms must be >= 0, got {self.delay_ms}")

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def delay_s(self) -> float:
        return self.delay_ms / 1000.0

    def placement(self) -> PlacementConfig:
        """The subset of settings the placement engine needs."""
        return PlacementConfig(spacing=self.spacing, max_tries=self.tries)

    def with_overrides(self, **overrides) -> RandomizerConfig:
        """Copy with the given fields replaced; None values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> dict:
        return asdict(self)


# Module-level singleton, importable everywhere.
DEFAULT_CONFIG = RandomizerConfig()


def _parse(data: dict, source: str) -> RandomizerConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a JSON object")
    try:
        return DEFAULT_CONFIG.with_overrides(**data)
    except ConfigError as e:
        raise ConfigError(f"{source}: {e}") from e


def _read(p: Path) -> RandomizerConfig:
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"{p}: invalid JSON ({e})") from e
    return _parse(data, str(p))


@lru_cache(maxsize=1)
def _load_default() -> RandomizerConfig:
    if not CONFIG_PATH.exists():
        return DEFAULT_CONFIG
    return _read(CONFIG_PATH)


def load_config(path: Path | str | None = None) -> RandomizerConfig:
    """Load settings from *path*, or from ``configs/randomizer.json``.

    The default file is read once and cached; an explicit path is read
    every time.
    """
    if path is None:
        return _load_default()
    return _read(Path(path))

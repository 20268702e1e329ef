from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from dnanalyzer.core.coverage import DEFAULT_COVERAGE_THRESHOLD, DEFAULT_WINDOW_SIZE
from dnanalyzer.exceptions import InputFormatError
from dnanalyzer.metrics.basic import DEFAULT_RANDOMNESS_THRESHOLD


@dataclass(frozen=True)
class AnalysisSettings:
    genetic_code: int = 1
    protein_frame: int = 0
    reading_frame: int = 1
    min_count: int = 5
    max_count: int = 10
    randomness_threshold: float = DEFAULT_RANDOMNESS_THRESHOLD
    coverage_window: int = DEFAULT_WINDOW_SIZE
    coverage_threshold: int = DEFAULT_COVERAGE_THRESHOLD

    def updated(self, overrides: Mapping[str, Any]) -> "AnalysisSettings":
        """Copy with non-None overrides applied; unknown keys are rejected."""
        known = [f.name for f in fields(self)]
        unknown = set(overrides) - set(known)
        if unknown:
            raise InputFormatError(
                f"Unknown settings key(s): {', '.join(sorted(unknown))}. "
                f"Known keys: {', '.join(known)}"
            )
        clean = {}
        for k, v in overrides.items():
            if v is None:
                continue
            cast = float if k == "randomness_threshold" else int
            if cast is int and isinstance(v, float) and not v.is_integer():
                raise InputFormatError(f"Invalid value for {k}: {v!r} (expected a whole number)")
            try:
                clean[k] = cast(v)
            except (TypeError, ValueError):
                raise InputFormatError(f"Invalid value for {k}: {v!r}") from None
        return replace(self, **clean)


def load_config(path: str) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError("Config YAML must parse to a mapping/object.")
    return cfg


def load_settings(path: Optional[str] = None, **overrides) -> AnalysisSettings:
    """
    Defaults, then the YAML file (if any), then keyword overrides.
    """
    settings = AnalysisSettings()
    if path:
        try:
            cfg = load_config(path)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            raise InputFormatError(str(e)) from e
        settings = settings.updated(cfg)
    return settings.updated(overrides)

"""Benchmark configuration loaded from YAML (or JSON).

Example ``config.yaml``::

    log_level: INFO
    seed: 42
    sorting:
      enabled: true
      sizes: [100, 1000, 5000, 10000]
      shapes: [Random, Sorted, ReverseSorted, NearlySorted]
      verify: true
    scalar:
      enabled: true
      upper_bound: 16000
      samples: 40
      reset_memo: false
    timing:
      disable_gc: false
      slow_trial_ms: null
    output:
      dir: results
      print_csv: true

Every section is optional; missing keys take the defaults of the dataclasses
below.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from algobench.exceptions import ConfigurationError, InvalidArgumentError
from algobench.models import ScalarSweepConfig, Shape, SortSweepConfig


@dataclass(frozen=True)
class TimingConfig:
    disable_gc: bool = False
    slow_trial_ms: float | None = None


@dataclass(frozen=True)
class OutputConfig:
    dir: str = "results"
    print_csv: bool = True


@dataclass(frozen=True)
class BenchConfig:
    """Whole benchmark setup; ``None`` for a sweep section disables it."""

    log_level: str = "INFO"
    seed: int | None = None
    sorting: SortSweepConfig | None = field(default_factory=SortSweepConfig)
    scalar: ScalarSweepConfig | None = field(default_factory=ScalarSweepConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping, got {type(value).__name__}")
    return value


def _int_list(value: Any, key: str) -> tuple[int, ...]:
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty list")
    return tuple(_int(v, key) for v in value)


def _names(value: Any, key: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty list of names")
    return tuple(str(v) for v in value)


def _int(value: Any, key: str) -> int:
    # YAML gives ints for integer literals; anything else (10.5, "10", true) is a typo
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")
    return value


def _bool(value: Any, key: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")
    return value


def _sorting(cfg: Dict[str, Any]) -> SortSweepConfig | None:
    sec = _section(cfg, "sorting")
    if not _bool(sec.get("enabled"), "sorting.enabled", True):
        return None
    defaults = SortSweepConfig()
    sizes = _int_list(sec["sizes"], "sorting.sizes") if "sizes" in sec else defaults.sizes
    if "shapes" in sec:
        raw = sec["shapes"]
        if not isinstance(raw, (list, tuple)) or not raw:
            raise ConfigurationError("'sorting.shapes' must be a non-empty list")
        try:
            shapes = tuple(Shape.parse(s) for s in raw)
        except InvalidArgumentError as e:
            raise ConfigurationError(str(e)) from e
    else:
        shapes = defaults.shapes
    return SortSweepConfig(
        sizes=sizes,
        shapes=shapes,
        candidates=_names(sec.get("candidates"), "sorting.candidates"),
        verify=_bool(sec.get("verify"), "sorting.verify", defaults.verify),
    )


def _scalar(cfg: Dict[str, Any]) -> ScalarSweepConfig | None:
    sec = _section(cfg, "scalar")
    if not _bool(sec.get("enabled"), "scalar.enabled", True):
        return None
    defaults = ScalarSweepConfig()
    return ScalarSweepConfig(
        upper_bound=_int(sec.get("upper_bound", defaults.upper_bound), "scalar.upper_bound"),
        samples=_int(sec.get("samples", defaults.samples), "scalar.samples"),
        candidates=_names(sec.get("candidates"), "scalar.candidates"),
        reset_memo=_bool(sec.get("reset_memo"), "scalar.reset_memo", defaults.reset_memo),
    )


def config_from_dict(cfg: Dict[str, Any]) -> BenchConfig:
    if not isinstance(cfg, dict):
        raise ConfigurationError("Top level of the config must be a mapping")
    timing = _section(cfg, "timing")
    output = _section(cfg, "output")
    slow = timing.get("slow_trial_ms")
    try:
        slow_trial_ms = float(slow) if slow is not None else None
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"'timing.slow_trial_ms' must be a number, got {slow!r}") from e
    seed = cfg.get("seed")
    return BenchConfig(
        log_level=str(cfg.get("log_level", "INFO")).upper(),
        seed=_int(seed, "seed") if seed is not None else None,
        sorting=_sorting(cfg),
        scalar=_scalar(cfg),
        timing=TimingConfig(
            disable_gc=_bool(timing.get("disable_gc"), "timing.disable_gc", False),
            slow_trial_ms=slow_trial_ms,
        ),
        output=OutputConfig(
            dir=str(output.get("dir", "results")),
            print_csv=_bool(output.get("print_csv"), "output.print_csv", True),
        ),
    )


def load_config(config_file: str = "config.yaml") -> BenchConfig:
    """Load configuration from a YAML or JSON file (chosen by extension)."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    try:
        if config_file.endswith((".yml", ".yaml")):
            raw = yaml.safe_load(text) or {}
        else:
            raw = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot parse {config_file}: {e}") from e
    return config_from_dict(raw)

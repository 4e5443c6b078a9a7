"""Tests for ``load_config``.

Each test writes a config file under ``tmp_path`` and checks either the parsed
``BenchConfig`` or the raised exception.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from algobench.config import BenchConfig, config_from_dict, load_config
from algobench.exceptions import ConfigurationError
from algobench.models import Shape

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config.yaml"


def _write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_repository_config_loads() -> None:
    cfg = load_config(str(REPO_CONFIG))
    assert cfg.seed == 42
    assert cfg.sorting is not None
    assert cfg.sorting.sizes == (100, 1000, 5000, 10000)
    assert cfg.sorting.shapes == tuple(Shape)
    assert cfg.scalar is not None
    assert (cfg.scalar.upper_bound, cfg.scalar.samples) == (16000, 40)


def test_yaml_sections_and_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "bench.yaml",
        """
log_level: debug
sorting:
  sizes: [10, 20]
  shapes: [sorted, ReverseSorted]
  candidates: [MergeSort]
  verify: false
scalar:
  enabled: false
timing:
  slow_trial_ms: 250
""",
    )
    cfg = load_config(path)
    assert cfg.log_level == "DEBUG"
    assert cfg.seed is None
    assert cfg.sorting.sizes == (10, 20)
    assert cfg.sorting.shapes == (Shape.SORTED, Shape.REVERSE_SORTED)
    assert cfg.sorting.candidates == ("MergeSort",)
    assert cfg.sorting.verify is False
    assert cfg.scalar is None
    assert cfg.timing.slow_trial_ms == 250.0
    assert cfg.timing.disable_gc is False
    assert cfg.output.dir == "results"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, "empty.yml", ""))
    assert cfg == BenchConfig()


def test_json_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "bench.json",
        json.dumps({"seed": 3, "scalar": {"upper_bound": 100, "samples": 10, "reset_memo": True}}),
    )
    cfg = load_config(path)
    assert cfg.seed == 3
    assert cfg.scalar.upper_bound == 100
    assert cfg.scalar.reset_memo is True


@pytest.mark.parametrize(
    "raw",
    [
        {"sorting": [1, 2]},  # section must be a mapping
        {"sorting": {"sizes": []}},
        {"sorting": {"sizes": ["ten"]}},
        {"sorting": {"shapes": ["Shuffled"]}},
        {"scalar": {"samples": "many"}},
        {"timing": {"slow_trial_ms": "slow"}},
        {"seed": True},
        # booleans must be real YAML booleans, not strings that read as one
        {"sorting": {"verify": "false"}},
        {"scalar": {"reset_memo": "no"}},
        {"scalar": {"enabled": "off"}},
        {"timing": {"disable_gc": 1}},
        {"output": {"print_csv": "yes"}},
        # integers are not truncated
        {"sorting": {"sizes": [10.5]}},
        {"sorting": {"sizes": [100, "1000"]}},
        {"scalar": {"samples": 40.5}},
        {"scalar": {"upper_bound": 16000.0}},
    ],
)
def test_invalid_values_raise(raw: dict) -> None:
    with pytest.raises(ConfigurationError):
        config_from_dict(raw)


def test_unparsable_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(_write(tmp_path, "broken.yaml", "sorting: [unclosed"))
    with pytest.raises(ConfigurationError):
        load_config(_write(tmp_path, "top.yaml", "- just\n- a list\n"))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))

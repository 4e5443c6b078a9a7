"""Hand-off of result records to downstream consumers.

Rows use the header ``Algorithm,ArrayType,Size,TimeMs``; ``TimeMs`` is written
with full float precision (``repr``), which is what ``csv.writer`` does for
floats.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import IO, Iterable

from algobench.models import CSV_HEADER, Result, SweepReport

logger = logging.getLogger("algobench.export")


def write_results_csv(results: Iterable[Result], stream: IO[str]) -> int:
    """Write header plus one row per result; returns the number of rows."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for r in results:
        writer.writerow(r.as_row())
        count += 1
    return count


def format_results_csv(results: Iterable[Result]) -> str:
    buf = io.StringIO()
    write_results_csv(results, buf)
    return buf.getvalue()


def read_results_csv(path: Path) -> list[Result]:
    rows: list[Result] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for r in reader:
            rows.append(
                Result(
                    algorithm=r["Algorithm"],
                    array_type=r["ArrayType"],
                    size=int(r["Size"]),
                    time_ms=float(r["TimeMs"]),
                )
            )
    return rows


def make_run_dir(base_dir: str | Path = "results") -> Path:
    """Create ``<base_dir>/<timestamp>``; earlier runs are left in place."""
    base = Path(base_dir)
    base.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base / stamp
    suffix = 1
    while run_dir.exists():
        run_dir = base / f"{stamp}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=True)
    return run_dir


def persist_report(report: SweepReport, run_dir: Path, meta: dict | None = None) -> tuple[Path, Path]:
    """Write ``results.csv`` and ``report.json`` into ``run_dir``.

    Returns:
        ``(csv_path, json_path)``.
    """
    run_dir.mkdir(parents=True, exist_ok=True)
    csv_path = run_dir / "results.csv"
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        write_results_csv(report.results, f)
    json_path = run_dir / "report.json"
    payload = report.to_dict()
    if meta:
        payload["meta"] = meta
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    logger.info("Saved %d results to %s", len(report.results), csv_path)
    if report.failures:
        logger.info("Saved %d failures to %s", len(report.failures), json_path)
    return csv_path, json_path

"""Append-only JSONL log of the solves made in one CLI run."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from mazesolver.solve.contracts import SolveRecord

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"
RUN_ID_FORMAT = "%Y-%m-%dT%H-%M-%SZ"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    """Create ``base_dir/<run id>`` and return it with its log path.

    The run id is the UTC start time unless ``timestamp`` is given.
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc).strftime(RUN_ID_FORMAT)
    run_dir = base_dir / timestamp
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir, run_dir / RUN_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    _write_entry(path, "header", metadata=metadata)


def append_solve_record(path: Path, solve: SolveRecord) -> None:
    _write_entry(path, "solve", record=solve.model_dump(mode="json"))


def read_solve_records(path: Path) -> Iterator[SolveRecord]:
    for entry in _iter_entries(path):
        if entry.get("type") == "solve" and "record" in entry:
            yield SolveRecord.model_validate(entry["record"])


def _write_entry(path: Path, kind: str, **fields: Any) -> None:
    line = json.dumps({"type": kind, "schema_version": SCHEMA_VERSION, **fields})
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{line}\n")


def _iter_entries(path: Path) -> Iterator[dict[str, Any]]:
    # Undecodable lines and entries from other schema versions are skipped.
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if not isinstance(entry, dict):
                continue
            if entry.get("schema_version") == SCHEMA_VERSION:
                yield entry

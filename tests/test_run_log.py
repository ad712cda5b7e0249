import json
from pathlib import Path

from mazesolver.db.run_log import (
    RUN_LOG_NAME,
    append_solve_record,
    create_run_folder,
    read_solve_records,
    write_header,
)
from mazesolver.solve.contracts import SolveRecord


def test_run_log_header_and_records(tmp_path: Path) -> None:
    run_dir, log_path = create_run_folder(tmp_path, timestamp="2026-10-18T09-30-00Z")
    write_header(log_path, metadata={"run_id": run_dir.name})
    append_solve_record(log_path, _record())

    with log_path.open("r", encoding="utf-8") as handle:
        records = [json.loads(line) for line in handle]

    assert log_path.name == RUN_LOG_NAME
    assert run_dir.name == "2026-10-18T09-30-00Z"
    assert records[0]["type"] == "header"
    assert records[0]["metadata"]["run_id"] == run_dir.name
    assert records[1]["type"] == "solve"
    assert records[1]["record"]["directions"] == ["right"]
    assert records[1]["record"]["path"] == [[0, 0], [1, 0]]


def test_read_solve_records_skips_header_and_junk(tmp_path: Path) -> None:
    _, log_path = create_run_folder(tmp_path, timestamp="2026-10-18T09-31-00Z")
    write_header(log_path, metadata={"run_id": "run"})
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write("not json\n")
        handle.write('{"type": "solve"}\n')
    append_solve_record(log_path, _record())

    records = list(read_solve_records(log_path))
    assert len(records) == 1
    assert records[0] == _record()


def _record() -> SolveRecord:
    return SolveRecord(
        width=2,
        height=1,
        rows=["00"],
        start=(0, 0),
        end=(1, 0),
        solved=True,
        path=[(0, 0), (1, 0)],
        directions=["right"],
        expanded=2,
        pushed=2,
    )


def test_read_solve_records_skips_other_schema_versions(tmp_path: Path) -> None:
    _, log_path = create_run_folder(tmp_path, timestamp="2026-10-18T09-32-00Z")
    stale = {
        "type": "solve",
        "schema_version": 0,
        "record": _record().model_dump(mode="json"),
    }
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(stale) + "\n")
        handle.write("[1, 2]\n")
    append_solve_record(log_path, _record())

    assert list(read_solve_records(log_path)) == [_record()]

"""Results Aggregation — folds per-framework result files into latest.json + index.json.

Layout under results_dir:
    frameworks/<entry>/<timestamp>.json   one file per benchmark run
    frameworks/<entry>/latest.json        copy of the newest run (rewritten here)
    index.json                            catalogue of all entries (written here)

Invariants:
    - Newest run = lexicographically greatest *.json name other than latest.json
    - A broken entry is logged and skipped; it never aborts the whole run
    - A missing or unreadable contract aborts the run (ContractError)
    - index.json entries sorted by framework id, case-insensitively
    - Output JSON is indented with 2 spaces
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from httpbench.core.errors import ContractError, ResultFileError
from httpbench.schemas.results import (
    BenchmarkContract, FrameworkResult, IndexEntry, IndexFile,
)

logger = logging.getLogger(__name__)

LATEST_FILE = "latest.json"
INDEX_FILE = "index.json"
FRAMEWORKS_DIR = "frameworks"


def load_contract(contract_file: Path) -> BenchmarkContract:
    """Read the benchmark contract or raise ContractError."""
    try:
        return BenchmarkContract.model_validate_json(contract_file.read_bytes())
    except OSError as exc:
        raise ContractError(
            f"Contract file not readable: {contract_file}", str(contract_file),
        ) from exc
    except ValidationError as exc:
        raise ContractError(
            f"Contract file is invalid: {contract_file}", str(contract_file),
        ) from exc


def find_latest_result(framework_dir: Path) -> Path | None:
    """Newest result file in an entry directory, or None if it has none."""
    candidates = sorted(
        (p for p in framework_dir.iterdir()
         if p.is_file() and p.suffix == ".json" and p.name != LATEST_FILE),
        key=lambda p: p.name,
        reverse=True,
    )
    return candidates[0] if candidates else None


def read_result(path: Path) -> tuple[FrameworkResult, dict]:
    """Parse a result file. Returns the model and the raw document."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return FrameworkResult.model_validate(raw), raw
    except (ValueError, ValidationError) as exc:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise ResultFileError(
            f"Invalid result file {path.name}: {exc}", str(path),
        ) from exc


def write_json(path: Path, document: dict) -> None:
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")


def process_entry(frameworks_dir: Path, entry: str) -> IndexEntry | None:
    """Refresh latest.json for one entry and build its index row."""
    framework_dir = frameworks_dir / entry
    latest_result = find_latest_result(framework_dir)
    if latest_result is None:
        logger.info(
            f"No result files found for {entry}, skipping",
            extra={"entry": entry},
        )
        return None

    result, raw = read_result(latest_result)
    write_json(framework_dir / LATEST_FILE, raw)
    logger.info(
        f"Updated latest.json for {entry} -> {latest_result.name}",
        extra={"entry": entry, "file": latest_result.name},
    )
    return IndexEntry(
        id=result.framework_id,
        language=result.language,
        framework=result.framework,
        measured_at=result.measured_at,
        latest=f"results/{FRAMEWORKS_DIR}/{entry}/{LATEST_FILE}",
    )


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def aggregate_results(
    results_dir: Path | str,
    contract_file: Path | str,
    now: datetime | None = None,
) -> IndexFile:
    """Rebuild every latest.json and index.json under results_dir."""
    results_dir = Path(results_dir)
    frameworks_dir = results_dir / FRAMEWORKS_DIR

    if not frameworks_dir.is_dir():
        logger.info("No frameworks directory found. Creating empty index.")
        frameworks_dir.mkdir(parents=True, exist_ok=True)

    contract = load_contract(Path(contract_file))

    entries: list[IndexEntry] = []
    for framework_dir in sorted(frameworks_dir.iterdir()):
        entry = framework_dir.name
        if not framework_dir.is_dir():
            logger.warning(
                f"Skipping non-directory {entry}", extra={"entry": entry},
            )
            continue
        try:
            index_entry = process_entry(frameworks_dir, entry)
        except (ResultFileError, OSError) as exc:
            logger.error(
                f"Error processing {entry}: {exc}",
                extra={"entry": entry, "error_code": getattr(exc, "code", None)},
            )
            continue
        if index_entry is not None:
            entries.append(index_entry)
            logger.debug(
                f"Added: {index_entry.id}",
                extra={"framework_id": index_entry.id},
            )

    entries.sort(key=lambda e: (e.id.casefold(), e.id))
    index = IndexFile(
        generated_at=format_timestamp(now or datetime.now(timezone.utc)),
        contract_version=contract.version,
        frameworks=entries,
    )
    index_path = results_dir / INDEX_FILE
    write_json(index_path, index.model_dump(mode="json"))
    logger.info(
        f"Index generated with {len(entries)} frameworks",
        extra={"file": str(index_path)},
    )
    return index

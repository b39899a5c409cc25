"""Structured output writer for rolling window snapshots.

Each accepted observation can be mirrored as one JSONL record so that a run
can later be loaded into a database or dataframe without re-parsing the
console table.
"""

from pathlib import Path
from typing import Dict
import json
from datetime import datetime, timezone

from .constants import DEFAULT_SNAPSHOTS_FILENAME
from .logging import get_logger
from .window import RollingWindow

logger = get_logger(__name__)


class StructuredOutputWriter:
    """Write rolling window snapshots as JSONL records."""

    def __init__(
        self,
        base_dir: str,
        snapshots_filename: str = DEFAULT_SNAPSHOTS_FILENAME,
    ) -> None:
        self.base_path = Path(base_dir)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.snapshots_path = self.base_path / snapshots_filename

    def _append_line(self, path: Path, record: Dict) -> None:
        """Append a single JSON record to the given file as one line."""
        try:
            if "recorded_at" not in record:
                record["recorded_at"] = datetime.now(timezone.utc).isoformat()

            with path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError as exc:
            # A failing sink must not stop the stream
            logger.error("Failed to append structured record to %s: %s", path, exc, exc_info=True)

    def record_snapshot(self, line_number: int, window: RollingWindow) -> None:
        """Record the window state right after an observation was put."""
        latest = window.latest
        record = {
            "line": line_number,
            "timestamp": latest.timestamp,
            "value": latest.value,
        }
        record.update(window.stats())
        self._append_line(self.snapshots_path, record)

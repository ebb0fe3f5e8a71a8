"""Analysis persistence: CRUD over a single JSON file.

The file holds every analysis, including its original CSV text, plus the
next id to hand out. Ids start at 1 and are never reused.
"""

import json
import logging
import threading
from pathlib import Path

from pydantic import BaseModel

from csvscope.models import Analysis

log = logging.getLogger(__name__)


class AnalysisFile(BaseModel):
    analyses: list[Analysis] = []
    next_id: int = 1


class AnalysisStore:
    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ── Persistence ──

    def _load(self) -> AnalysisFile:
        if self._path.exists():
            raw = json.loads(self._path.read_text())
            return AnalysisFile(**raw)
        return AnalysisFile()

    def _save(self, data: AnalysisFile) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(data.model_dump_json(indent=2) + "\n")

    # ── CRUD ──

    def save(self, analysis: Analysis) -> Analysis:
        """Store an analysis and return a copy carrying its new id."""
        with self._lock:
            data = self._load()
            stored = analysis.model_copy(update={"id": data.next_id})
            data.analyses.append(stored)
            data.next_id += 1
            self._save(data)
        log.info("Saved analysis %d (%s)", stored.id, self._path)
        return stored

    def find_by_id(self, analysis_id: int) -> Analysis | None:
        with self._lock:
            for a in self._load().analyses:
                if a.id == analysis_id:
                    return a
        return None

    def find_all(self) -> list[Analysis]:
        with self._lock:
            return self._load().analyses

    def delete(self, analysis_id: int) -> bool:
        with self._lock:
            data = self._load()
            original_len = len(data.analyses)
            data.analyses = [a for a in data.analyses if a.id != analysis_id]
            if len(data.analyses) == original_len:
                return False
            self._save(data)
        log.info("Deleted analysis %d", analysis_id)
        return True

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class GenerationTrace:
    description: str
    intent: Dict[str, Any]
    component_kind: str
    framework: str
    styling: str
    variants: List[str]
    meta: Dict[str, Any]
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, default=str)


class TraceLogger:
    """Appends one JSON line per generation to ``generations-<YYYYMMDD>.jsonl``.

    Records are grouped into one file per UTC day of ``recorded_at``.
    """

    def __init__(self, enabled: bool, directory: str) -> None:
        self.enabled = enabled
        self.dir = Path(directory)
        if self.enabled:
            self.dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, trace: GenerationTrace) -> Path:
        return self.dir / f"generations-{trace.recorded_at.strftime('%Y%m%d')}.jsonl"

    def save(self, trace: GenerationTrace) -> Path | None:
        if not self.enabled:
            return None
        path = self.path_for(trace)
        with path.open("a", encoding="utf-8") as f:
            f.write(trace.to_json() + "\n")
        return path

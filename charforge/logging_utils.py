from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel


class NDJSONWriter:
    """Append-only journal, one JSON object per line."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._fp = path.open("a", encoding="utf-8")

    def write(self, obj: dict | object) -> None:
        if isinstance(obj, BaseModel):
            obj = obj.model_dump(mode="json", exclude_none=True)
        elif is_dataclass(obj):
            obj = asdict(obj)
        ts = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        obj = {"ts": ts, **obj}
        self._fp.write(json.dumps(obj, ensure_ascii=False) + "\n")
        self._fp.flush()

    def close(self) -> None:
        self._fp.close()

    def __enter__(self) -> "NDJSONWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

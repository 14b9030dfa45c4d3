from __future__ import annotations
import orjson
from typing import Any, Dict, List, Sequence

def read_text(path: str) -> str:
    # Strict: malformed UTF-8 raises here, before any text reaches a bag.
    with open(path, "rb") as f:
        return f.read().decode("utf-8")

def read_jsonl(path: str) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    with open(path, "rb") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            rows.append(orjson.loads(line))
    return rows

def document_text(row: Dict[str, Any], fields: Sequence[str]) -> str:
    parts = [row[k] for k in fields if isinstance(row.get(k), str)]
    return " ".join(parts).strip()

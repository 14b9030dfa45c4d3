from dataclasses import dataclass, field
import os
from typing import Tuple

def _text_fields() -> Tuple[str, ...]:
    raw = os.getenv("BBOW_TEXT_FIELDS", "title,text")
    return tuple(f.strip() for f in raw.split(",") if f.strip())

@dataclass(frozen=True)
class BbowConfig:
    text_fields: Tuple[str, ...] = field(default_factory=_text_fields)
    top_n: int = field(default_factory=lambda: int(os.getenv("BBOW_TOP_N", "20")))

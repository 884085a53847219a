# core/results.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass
class MLCSResult:
    sequence: str
    status: str  # "found" | "exhausted" | "truncated"
    rounds: int = 0
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    runtime_sec: float = 0.0
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def length(self) -> int:
        return len(self.sequence)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["length"] = self.length
        return out

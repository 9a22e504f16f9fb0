"""Append-only trace log for decode runs."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Tuple


@dataclass
class TraceLog:
    """Record one decode run: its source, each invalid byte span and a summary.

    Entries are timestamped, kept in ``events`` and appended to ``path``.
    """

    path: Path
    source: str = ""
    events: List[str] = field(default_factory=list)
    spans: List[Tuple[int, int]] = field(default_factory=list)

    def log(self, message: str) -> None:
        stamp = datetime.now(timezone.utc).isoformat()
        entry = f"{stamp} | {self.source} | {message}" if self.source else f"{stamp} | {message}"
        self.events.append(entry)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry + "\n")

    def start(self, policy_name: str) -> None:
        self.spans.clear()
        self.log(f"start decode policy={policy_name}")

    def invalid_span(self, start: int, end: int) -> None:
        self.spans.append((start, end))
        self.log(f"invalid bytes [{start}, {end})")

    def summary(self, total_bytes: int) -> None:
        self.log(f"decoded {total_bytes} bytes, {len(self.spans)} invalid")

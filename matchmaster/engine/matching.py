"""Cross-participant matching of normalized items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Sequence

from matchmaster.text.normalize import normalize_item


@dataclass(frozen=True)
class Participant:
    participant_id: Hashable
    name: str = ""
    items: Sequence[str] = ()


@dataclass(frozen=True)
class AggregateRecord:
    key: str
    label: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "label": self.label, "count": self.count}


@dataclass(frozen=True)
class ResultSet:
    """Ranked aggregate records plus the number of participants matched."""

    results: tuple[AggregateRecord, ...] = ()
    total_participants: int = 0

    def is_shared_by_all(self, record: AggregateRecord) -> bool:
        return self.total_participants > 0 and record.count == self.total_participants

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "totalParticipants": self.total_participants,
        }


def _rank_key(record: AggregateRecord) -> tuple[int, str]:
    return -record.count, record.key


def match_participants(participants: Iterable[Participant]) -> ResultSet:
    """Count how many participants share each normalized item.

    Rules:
    - Items normalizing to "" are skipped.
    - A participant counts at most once per key, however often they repeat it.
    - The first raw text seen for a key (trimmed) becomes its label.
    - Output is sorted by count descending, then key ascending.
    """
    participants = list(participants)
    labels: dict[str, str] = {}
    counts: dict[str, int] = {}

    for participant in participants:
        seen: set[str] = set()
        for raw in participant.items:
            key = normalize_item(raw)
            if not key or key in seen:
                continue
            seen.add(key)
            if key not in counts:
                labels[key] = raw.strip() or key
                counts[key] = 0
            counts[key] += 1

    records = [
        AggregateRecord(key=key, label=labels[key], count=count)
        for key, count in counts.items()
    ]
    records.sort(key=_rank_key)
    return ResultSet(results=tuple(records), total_participants=len(participants))

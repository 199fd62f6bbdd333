"""Session state for collecting items from a small group of participants.

The engine itself is stateless; this module owns the mutable parts of a run
(participant list, entry cursor, last computed results) and hands the engine an
immutable snapshot when matching.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Hashable

from matchmaster.engine.matching import Participant, ResultSet, match_participants

MIN_PARTICIPANTS = 2
MAX_PARTICIPANTS = 5
MIN_ITEMS = 5
MAX_ITEMS = 20


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


@dataclass(frozen=True)
class SessionConfig:
    """How many participants take part and how many slots each one fills."""

    participant_count: int = 3
    item_count: int = 10

    def clamped(self) -> SessionConfig:
        return SessionConfig(
            participant_count=_clamp(
                self.participant_count, MIN_PARTICIPANTS, MAX_PARTICIPANTS
            ),
            item_count=_clamp(self.item_count, MIN_ITEMS, MAX_ITEMS),
        )


def create_participants(cfg: SessionConfig) -> list[Participant]:
    """Create participants with default names and empty item slots."""
    cfg = cfg.clamped()
    return [
        Participant(
            participant_id=i,
            name=f"Person {i + 1}",
            items=("",) * cfg.item_count,
        )
        for i in range(cfg.participant_count)
    ]


class Session:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.phase = "setup"
        self.config = SessionConfig()
        self.participants: list[Participant] = []
        self.results: ResultSet | None = None
        self.current_index = 0

    def start(self, cfg: SessionConfig) -> list[Participant]:
        self.config = cfg.clamped()
        self.participants = create_participants(self.config)
        self.results = None
        self.current_index = 0
        self.phase = "input"
        return self.participants

    def _position(self, participant_id: Hashable) -> int:
        for pos, participant in enumerate(self.participants):
            if participant.participant_id == participant_id:
                return pos
        raise KeyError(f"unknown participant: {participant_id!r}")

    def rename(self, participant_id: Hashable, name: str) -> Participant:
        pos = self._position(participant_id)
        updated = replace(self.participants[pos], name=name)
        self.participants[pos] = updated
        return updated

    def set_item(self, participant_id: Hashable, index: int, value: str) -> Participant:
        pos = self._position(participant_id)
        items = list(self.participants[pos].items)
        if not 0 <= index < len(items):
            raise IndexError(
                f"slot {index} out of range for {len(items)} items"
            )
        items[index] = value
        updated = replace(self.participants[pos], items=tuple(items))
        self.participants[pos] = updated
        return updated

    @property
    def current_participant(self) -> Participant | None:
        if self.phase != "input" or not self.participants:
            return None
        return self.participants[self.current_index]

    def confirm_and_next(self) -> Participant | None:
        """Move to the next participant, or to the summary after the last one."""
        if self.current_participant is None:
            return None
        if self.current_index < len(self.participants) - 1:
            self.current_index += 1
        else:
            self.phase = "summary"
        return self.current_participant

    def run_match(self) -> ResultSet:
        if not self.participants:
            raise RuntimeError("no participants; call start() first")
        self.results = match_participants(tuple(self.participants))
        return self.results

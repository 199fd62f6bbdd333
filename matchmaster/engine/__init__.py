"""Matching engine (normalize, dedupe per participant, tally, rank)."""

from matchmaster.engine.matching import (
    AggregateRecord,
    Participant,
    ResultSet,
    match_participants,
)

__all__ = ["AggregateRecord", "Participant", "ResultSet", "match_participants"]

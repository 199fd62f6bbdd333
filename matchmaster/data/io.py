"""I/O helpers for participant item tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from matchmaster.engine.matching import Participant


def _cell_text(value: object) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


def participants_from_dataframe(df: pd.DataFrame) -> list[Participant]:
    """Group a long-format item table into participants.

    Expects:
    - columns: participant_id, item
    - optional: name (first non-empty value per participant), slot
    Participants keep their first-appearance order; items follow `slot`
    when present, otherwise row order.
    """
    if "participant_id" not in df.columns:
        raise ValueError("participants table must contain 'participant_id'")
    if "item" not in df.columns:
        raise ValueError("participants table must contain 'item'")

    missing = df["participant_id"].isna() | (
        df["participant_id"].astype(str).str.strip() == ""
    )
    if missing.any():
        print(f"Warning: Skipping {int(missing.sum())} rows without participant_id")
        df = df[~missing]

    order = {pid: pos for pos, pid in enumerate(pd.unique(df["participant_id"]))}
    if "slot" in df.columns:
        slots = pd.to_numeric(df["slot"], errors="coerce")
        df = df.assign(_slot=slots).sort_values("_slot", kind="stable")

    participants: list[Participant] = []
    for pid, group in df.groupby("participant_id", sort=False):
        names = []
        if "name" in group.columns:
            names = [_cell_text(n) for n in group["name"] if _cell_text(n).strip()]
        participants.append(
            Participant(
                participant_id=pid,
                name=names[0] if names else "",
                items=tuple(_cell_text(v) for v in group["item"]),
            )
        )

    participants.sort(key=lambda p: order[p.participant_id])
    return participants


def load_participants(participants_csv: Path) -> list[Participant]:
    df = pd.read_csv(participants_csv, dtype=str, keep_default_na=False)
    return participants_from_dataframe(df)


def load_participants_wide(participants_csv: Path) -> list[Participant]:
    """One column per participant (header = display name), one row per slot.

    The header row is read as data so blank or repeated names stay as typed.
    """
    df = pd.read_csv(
        participants_csv, header=None, dtype=str, keep_default_na=False
    )
    names = [_cell_text(v).strip() for v in df.iloc[0]]
    rows = df.iloc[1:]
    return [
        Participant(
            participant_id=i,
            name=name,
            items=tuple(_cell_text(v) for v in rows[column]),
        )
        for i, (column, name) in enumerate(zip(df.columns, names))
    ]

"""
Contamination check against a flagged-entry table.

This is a format-based DEMO check: it only compares normalized strings
against a static list and must never be presented as a compliance verdict.
"""

from __future__ import annotations

from typing import Iterable

from txwhisperer.classifiers import detect
from txwhisperer.models.chain import Chain, InputKind
from txwhisperer.models.contamination import (
    ContaminationMatch,
    FlaggedEntry,
    FlaggedTable,
    MatchResult,
)
from txwhisperer.validation.normalize import is_hex_shaped, normalize

DISCLAIMER = "This is a DEMO blacklist. Do not use for actual compliance decisions."


def normalize_value(raw: str) -> str:
    return normalize(raw)


def values_match(normalized_input: str, flagged_value: str) -> bool:
    """Hex compares case-insensitively; base58 is case-sensitive."""
    other = normalize(flagged_value)
    if is_hex_shaped(normalized_input):
        return normalized_input.lower() == other.lower()
    return normalized_input == other


def _snapshot(table: FlaggedTable | Iterable[FlaggedEntry]) -> tuple[FlaggedEntry, ...]:
    if isinstance(table, FlaggedTable):
        return table.entries
    return tuple(table)


def check_contamination(
    raw: str, table: FlaggedTable | Iterable[FlaggedEntry]
) -> MatchResult:
    normalized = normalize(raw)
    chain, kind = detect(normalized)

    if chain is Chain.UNKNOWN or kind is InputKind.UNKNOWN:
        return MatchResult(status="unknown")

    entries = _snapshot(table)
    matched: list[int] = []
    seen: set[int] = set()

    for idx, entry in enumerate(entries):
        if entry.chain == chain and entry.kind == kind and values_match(normalized, entry.value):
            matched.append(idx)
            seen.add(idx)

    # Value-only matches guard against a misclassified entry or input
    for idx, entry in enumerate(entries):
        if idx not in seen and values_match(normalized, entry.value):
            matched.append(idx)

    matches = tuple(ContaminationMatch(input=normalized, entry=entries[idx]) for idx in matched)
    return MatchResult(status="flagged" if matches else "clean", matches=matches)


def is_flagged(raw: str, table: FlaggedTable | Iterable[FlaggedEntry]) -> bool:
    return check_contamination(raw, table).status == "flagged"

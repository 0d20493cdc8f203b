from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from txwhisperer.models.chain import Chain, InputKind

MatchStatus = Literal["clean", "flagged", "unknown"]


class FlaggedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    chain: Chain
    kind: InputKind
    label: str
    source: str


class TableInfo(BaseModel):
    version: str
    last_updated: str
    entry_count: int


class FlaggedTable(BaseModel):
    """A versioned snapshot of flagged entries, as shipped in the dataset file."""

    model_config = ConfigDict(frozen=True)

    version: str
    description: str = ""
    disclaimer: str = ""
    last_updated: str
    entries: tuple[FlaggedEntry, ...] = Field(default_factory=tuple)

    def info(self) -> TableInfo:
        return TableInfo(
            version=self.version,
            last_updated=self.last_updated,
            entry_count=len(self.entries),
        )


class ContaminationMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    input: str
    entry: FlaggedEntry


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: MatchStatus
    matches: tuple[ContaminationMatch, ...] = ()

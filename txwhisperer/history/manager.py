from __future__ import annotations

from collections import OrderedDict

from pydantic import BaseModel

from txwhisperer.models.chain import Chain, InputKind
from txwhisperer.models.contamination import MatchStatus

MAX_ITEMS = 50


class HistoryItem(BaseModel):
    value: str
    chain: Chain = Chain.UNKNOWN
    kind: InputKind = InputKind.UNKNOWN
    status: MatchStatus | None = None


class CheckHistory:
    """Most-recently-used list of checked values, de-duplicated by value."""

    def __init__(self, max_items: int = MAX_ITEMS, items: list[HistoryItem] | None = None):
        self._store: OrderedDict[str, HistoryItem] = OrderedDict()
        self._max_items = max_items
        # items arrive newest first; the store keeps newest last
        for item in reversed(items or []):
            self._put(item)

    def _put(self, item: HistoryItem) -> None:
        if item.value in self._store:
            del self._store[item.value]

        self._store[item.value] = item

        while len(self._store) > self._max_items:
            self._store.popitem(last=False)

    def add(
        self,
        value: str,
        chain: Chain = Chain.UNKNOWN,
        kind: InputKind = InputKind.UNKNOWN,
        status: MatchStatus | None = None,
    ) -> HistoryItem | None:
        value = value.strip()
        if not value:
            return None
        item = HistoryItem(value=value, chain=chain, kind=kind, status=status)
        self._put(item)
        return item

    def get(self, value: str) -> HistoryItem | None:
        return self._store.get(value)

    def items(self) -> list[HistoryItem]:
        return list(reversed(self._store.values()))

    def remove(self, value: str) -> bool:
        return self._store.pop(value, None) is not None

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

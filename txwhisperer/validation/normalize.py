"""
Input normalization for pasted identifiers.

Users paste hashes straight out of explorers, chat messages and terminals, so
the raw value may be split across lines, wrapped in an explorer URL or carry
an uppercase ``0X`` prefix. ``normalize`` turns any of those into the single
canonical form the classifiers expect. Hex values are lowercased; base58
values keep their case because base58 is case-sensitive.
"""

from __future__ import annotations

import re
from typing import Callable

from txwhisperer.validation.charset import is_hex

_WHITESPACE_RE = re.compile(r"\s+")

_B58 = "1-9A-HJ-NP-Za-km-z"

# Fragments that mark a pasted value as a URL even without a scheme
URL_FRAGMENTS = ("://", ".io/", ".com/", ".space/", ".info/", ".fm/")

Extractor = Callable[[re.Match], str]


def _group(match: re.Match[str]) -> str:
    return match.group(1)


# Ordered: the first matching pattern wins. Host and path literals match in
# any case; capture classes keep their own case rules.
EXPLORER_PATTERNS: list[tuple[re.Pattern[str], Extractor]] = [
    # Etherscan and other EVM explorers
    (re.compile(r"(?i:/tx/)((?i:0x)[a-fA-F0-9]{64})/?"), _group),
    # Solana
    (re.compile(rf"(?i:solscan\.io/tx/)([{_B58}]{{80,90}})/?"), _group),
    (re.compile(rf"(?i:explorer\.solana\.com/tx/)([{_B58}]{{80,90}})"), _group),
    (re.compile(rf"(?i:solana\.fm/tx/)([{_B58}]{{80,90}})"), _group),
    # Bitcoin
    (re.compile(r"(?i:mempool\.space/tx/)([a-fA-F0-9]{64})/?"), _group),
    (re.compile(r"(?i:blockstream\.info/tx/)([a-fA-F0-9]{64})/?"), _group),
    (re.compile(r"(?i:blockchain\.com/(?:btc/)?tx/)([a-fA-F0-9]{64})/?"), _group),
    (re.compile(r"(?i:blockchair\.com/bitcoin/transaction/)([a-fA-F0-9]{64})/?"), _group),
    # Address pages
    (re.compile(r"(?i:/address/)((?i:0x)[a-fA-F0-9]{40})(?:[/?#]|$)"), _group),
    (re.compile(r"(?i:/(?:address|account)/)([a-zA-Z0-9]{25,62})(?:[/?#]|$)"), _group),
    # Generic fallbacks
    (re.compile(r"((?i:0x)[a-fA-F0-9]{64})"), _group),
    (re.compile(r"/([a-fA-F0-9]{64})/?$"), _group),
]


def looks_like_url(value: str) -> bool:
    lowered = value.lower()
    return any(fragment in lowered for fragment in URL_FRAGMENTS)


def extract_from_url(value: str) -> str | None:
    for pattern, extractor in EXPLORER_PATTERNS:
        match = pattern.search(value)
        if match:
            return extractor(match)
    return None


def is_hex_shaped(value: str) -> bool:
    """Whether a normalized value follows hex (case-insensitive) semantics."""
    return value.startswith("0x") or (len(value) == 64 and is_hex(value))


def normalize(raw: str) -> str:
    cleaned = _WHITESPACE_RE.sub("", raw)

    if looks_like_url(cleaned):
        extracted = extract_from_url(cleaned)
        if extracted:
            cleaned = extracted

    if cleaned.startswith("0X"):
        cleaned = "0x" + cleaned[2:]

    if is_hex_shaped(cleaned):
        return cleaned.lower()

    return cleaned

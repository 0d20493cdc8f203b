from __future__ import annotations

import base58

HEX_CHARS = frozenset("0123456789abcdefABCDEF")
# Bitcoin alphabet: no 0, O, I or l
BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def is_hex(value: str) -> bool:
    return bool(value) and all(ch in HEX_CHARS for ch in value)


def is_base58(value: str) -> bool:
    return bool(value) and all(ch in BASE58_CHARS for ch in value)


def has_non_hex(value: str) -> bool:
    """True if at least one character falls outside the hex alphabet.

    Base58 keys and signatures of a given length could in principle be made of
    hex-valid characters only; such values are treated as ambiguous and never
    claimed by Solana.
    """
    return any(ch not in HEX_CHARS for ch in value)


def is_trivial_hex(value: str) -> bool:
    """All-zero or all-F hex payloads are placeholders, not identifiers."""
    lowered = value.lower()
    return bool(lowered) and (set(lowered) == {"0"} or set(lowered) == {"f"})

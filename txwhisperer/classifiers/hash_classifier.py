"""
Transaction hash / signature classifier.

EVM and Bitcoin both use a 32-byte hash rendered as 64 hex characters; the
``0x`` prefix is the only thing telling them apart. Solana signatures are
64-byte ed25519 signatures in base58, which land between 85 and 90
characters.
"""

from __future__ import annotations

from typing import Callable

from txwhisperer.models.chain import Chain
from txwhisperer.validation.charset import has_non_hex, is_base58, is_hex, is_trivial_hex

HASH_HEX_LEN = 64

SOLANA_SIG_MIN_LEN = 86
SOLANA_SIG_MAX_LEN = 90
SOLANA_SIG_FALLBACK_MIN_LEN = 85


def _has_evm_prefix(value: str) -> bool:
    return value[:2] in ("0x", "0X")


def is_evm_hash(value: str) -> bool:
    if not _has_evm_prefix(value):
        return False
    payload = value[2:]
    return len(payload) == HASH_HEX_LEN and is_hex(payload) and not is_trivial_hex(payload)


def is_bitcoin_hash(value: str) -> bool:
    return len(value) == HASH_HEX_LEN and is_hex(value) and not is_trivial_hex(value)


def _is_solana_signature_in(value: str, min_len: int, max_len: int) -> bool:
    return min_len <= len(value) <= max_len and is_base58(value) and has_non_hex(value)


def is_solana_signature(value: str) -> bool:
    return _is_solana_signature_in(value, SOLANA_SIG_FALLBACK_MIN_LEN, SOLANA_SIG_MAX_LEN)


def _is_typical_solana_signature(value: str) -> bool:
    return _is_solana_signature_in(value, SOLANA_SIG_MIN_LEN, SOLANA_SIG_MAX_LEN)


# Tried in order once the 0x branch is ruled out. A 64-char value can never
# fall in the Solana window, but the order is kept fixed regardless.
# The widened window still requires a non-hex char; it only adds length 85.
HASH_RULES: list[tuple[Callable[[str], bool], Chain]] = [
    (_is_typical_solana_signature, Chain.SOLANA),
    (is_bitcoin_hash, Chain.BITCOIN),
    (is_solana_signature, Chain.SOLANA),
]


def detect_chain_from_hash(value: str) -> Chain:
    # 0x-prefixed values are EVM or nothing
    if _has_evm_prefix(value):
        return Chain.EVM if is_evm_hash(value) else Chain.UNKNOWN

    for predicate, chain in HASH_RULES:
        if predicate(value):
            return chain
    return Chain.UNKNOWN

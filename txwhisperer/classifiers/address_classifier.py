"""
Wallet address classifier.

Purely format based: prefix, length and alphabet. Checksums (EIP-55,
Base58Check, Bech32) are deliberately not verified, so a well-shaped address
with a typo still classifies.
"""

from __future__ import annotations

import re
from typing import Callable

from txwhisperer.models.chain import Chain
from txwhisperer.validation.charset import has_non_hex, is_base58, is_hex, is_trivial_hex

EVM_ADDRESS_HEX_LEN = 40

BTC_LEGACY_PREFIXES = ("1", "3")  # P2PKH, P2SH
BTC_LEGACY_MIN_LEN = 25
BTC_LEGACY_MAX_LEN = 34

# bc1 in any case + lowercase bech32 data chars (no 1, b, i, o), 42-62 chars in total
BTC_BECH32_RE = re.compile(r"(?i:bc1)[ac-hj-np-z02-9]{39,59}")

SOLANA_ADDRESS_MIN_LEN = 32
SOLANA_ADDRESS_MAX_LEN = 44


def is_evm_address(value: str) -> bool:
    if value[:2] not in ("0x", "0X"):
        return False
    payload = value[2:]
    return len(payload) == EVM_ADDRESS_HEX_LEN and is_hex(payload) and not is_trivial_hex(payload)


def is_bitcoin_address(value: str) -> bool:
    if value.startswith(BTC_LEGACY_PREFIXES):
        return BTC_LEGACY_MIN_LEN <= len(value) <= BTC_LEGACY_MAX_LEN and is_base58(value)
    return BTC_BECH32_RE.fullmatch(value) is not None


def is_solana_address(value: str) -> bool:
    return (
        SOLANA_ADDRESS_MIN_LEN <= len(value) <= SOLANA_ADDRESS_MAX_LEN
        and is_base58(value)
        and has_non_hex(value)
    )


# Tie-break order: EVM, then Bitcoin, then Solana
ADDRESS_RULES: list[tuple[Callable[[str], bool], Chain]] = [
    (is_evm_address, Chain.EVM),
    (is_bitcoin_address, Chain.BITCOIN),
    (is_solana_address, Chain.SOLANA),
]


def detect_chain_from_address(value: str) -> Chain:
    for predicate, chain in ADDRESS_RULES:
        if predicate(value):
            return chain
    return Chain.UNKNOWN

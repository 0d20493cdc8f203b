from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Chain(str, Enum):
    """Blockchain network, as inferred from identifier format alone."""

    EVM = "evm"
    BITCOIN = "bitcoin"
    SOLANA = "solana"
    UNKNOWN = "unknown"


class InputKind(str, Enum):
    """Whether an identifier is a wallet address or a transaction hash."""

    ADDRESS = "address"
    TX = "tx"
    UNKNOWN = "unknown"


class Detection(NamedTuple):
    chain: Chain
    kind: InputKind


UNDETECTED = Detection(Chain.UNKNOWN, InputKind.UNKNOWN)

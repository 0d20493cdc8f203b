import pytest

from txwhisperer.models.chain import Chain, InputKind
from txwhisperer.models.contamination import FlaggedEntry, FlaggedTable

# --- Real identifiers from each chain ---

EVM_TX = "0x5c504ed432cb51138bcf09aa5e8a410dd4a1e204ef84bfed1be16dfba1b22060"
EVM_TX_2 = "0x2d05f14d405d3a22c9e8d1c3e67ed8f9c17e75e5b4c4b3f2f1a7b8c9d0e1f234"
BTC_TX = "e3bf3d07d4b0375638d5f1db5255fe07ba2c4cb067cd81b84ee974b6585fb468"
BTC_TX_GENESIS = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
SOL_TX = "5UfDuX7WXY4X3X4Gi94YcXdU8GjRqNn7dvK6Krw39e2qFjYBrtPgNE7C3UcC1oVPpJRqHqKYnNhb9dJmjMgfb1XA"
SOL_TX_2 = "4Ee8qqcYkBkjLNWJzK3u4YN4b5yVcKq9ZBjXJvPeZgKBcKc5NJNj4FhEmXMrQJPqLQSHvVVS9mEGqT3wkBx5M9Fn"

EVM_ADDR = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"  # vitalik.eth
EVM_ADDR_USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
TORNADO_ADDR = "0x8589427373D6D84E98730D7795D8f6f8731FDA16"
BTC_ADDR_P2PKH = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
BTC_ADDR_P2SH = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"
BTC_ADDR_BECH32 = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"
SOL_ADDR_USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SOL_ADDR_WSOL = "So11111111111111111111111111111111111111112"


def _entry(value: str, chain: Chain, kind: InputKind, label: str) -> FlaggedEntry:
    return FlaggedEntry(value=value, chain=chain, kind=kind, label=label, source="Test Reports")


@pytest.fixture
def entries() -> list[FlaggedEntry]:
    return [
        _entry(TORNADO_ADDR, Chain.EVM, InputKind.ADDRESS, "Tornado Cash: Router"),
        _entry(EVM_TX_2, Chain.EVM, InputKind.TX, "Flagged EVM transfer"),
        _entry(BTC_ADDR_P2PKH, Chain.BITCOIN, InputKind.ADDRESS, "Flagged Bitcoin address"),
        _entry(BTC_TX_GENESIS, Chain.BITCOIN, InputKind.TX, "Flagged Bitcoin transaction"),
        _entry(SOL_ADDR_USDC, Chain.SOLANA, InputKind.ADDRESS, "Flagged Solana address"),
        _entry(SOL_TX_2, Chain.SOLANA, InputKind.TX, "Flagged Solana signature"),
    ]


@pytest.fixture
def table(entries) -> FlaggedTable:
    return FlaggedTable(version="9.9.9", last_updated="2025-01-01", entries=tuple(entries))

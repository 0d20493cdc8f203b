from __future__ import annotations

from typing import NamedTuple

from txwhisperer.classifiers import detect
from txwhisperer.models.chain import Chain, InputKind
from txwhisperer.validation.normalize import normalize

CHAIN_NAMES: dict[Chain, str] = {
    Chain.EVM: "Ethereum / EVM",
    Chain.BITCOIN: "Bitcoin",
    Chain.SOLANA: "Solana",
    Chain.UNKNOWN: "Unknown",
}


class Explorer(NamedTuple):
    name: str
    tx_url: str
    address_url: str


# First explorer per chain is the primary one
EXPLORERS: dict[Chain, list[Explorer]] = {
    Chain.EVM: [
        Explorer("Etherscan", "https://etherscan.io/tx/", "https://etherscan.io/address/"),
        Explorer("Polygonscan", "https://polygonscan.com/tx/", "https://polygonscan.com/address/"),
        Explorer("Arbiscan", "https://arbiscan.io/tx/", "https://arbiscan.io/address/"),
        Explorer("BscScan", "https://bscscan.com/tx/", "https://bscscan.com/address/"),
    ],
    Chain.BITCOIN: [
        Explorer("Mempool.space", "https://mempool.space/tx/", "https://mempool.space/address/"),
        Explorer("Blockstream", "https://blockstream.info/tx/", "https://blockstream.info/address/"),
        Explorer(
            "Blockchain.com",
            "https://www.blockchain.com/btc/tx/",
            "https://www.blockchain.com/btc/address/",
        ),
    ],
    Chain.SOLANA: [
        Explorer("Solscan", "https://solscan.io/tx/", "https://solscan.io/account/"),
        Explorer(
            "Solana Explorer",
            "https://explorer.solana.com/tx/",
            "https://explorer.solana.com/address/",
        ),
        Explorer("SolanaFM", "https://solana.fm/tx/", "https://solana.fm/address/"),
    ],
}


def chain_display_name(chain: Chain) -> str:
    return CHAIN_NAMES[chain]


def _link(explorer: Explorer, kind: InputKind, normalized: str) -> str:
    base = explorer.address_url if kind is InputKind.ADDRESS else explorer.tx_url
    return f"{base}{normalized}"


def explorer_url(raw: str, chain: Chain) -> str | None:
    """Primary explorer page for a value already known to belong to ``chain``."""
    explorers = EXPLORERS.get(chain)
    if not explorers:
        return None
    normalized = normalize(raw)
    return _link(explorers[0], detect(normalized).kind, normalized)


def explorer_links(raw: str) -> dict[str, str]:
    normalized = normalize(raw)
    chain, kind = detect(normalized)
    return {
        explorer.name: _link(explorer, kind, normalized)
        for explorer in EXPLORERS.get(chain, [])
    }

from txwhisperer.classifiers.address_classifier import detect_chain_from_address
from txwhisperer.classifiers.hash_classifier import detect_chain_from_hash
from txwhisperer.models.chain import UNDETECTED, Chain, Detection, InputKind
from txwhisperer.validation.normalize import normalize

MIN_INPUT_LENGTH = 20


def detect(raw: str) -> Detection:
    normalized = normalize(raw)
    if len(normalized) < MIN_INPUT_LENGTH:
        return UNDETECTED

    # Addresses first: they are shorter and must not be read as hashes
    chain = detect_chain_from_address(normalized)
    if chain is not Chain.UNKNOWN:
        return Detection(chain, InputKind.ADDRESS)

    chain = detect_chain_from_hash(normalized)
    if chain is not Chain.UNKNOWN:
        return Detection(chain, InputKind.TX)

    return UNDETECTED


def detect_chain(raw: str) -> Chain:
    return detect(raw).chain


def detect_input_kind(raw: str) -> InputKind:
    return detect(raw).kind


def is_valid(raw: str) -> bool:
    return detect(raw).chain is not Chain.UNKNOWN


def is_valid_address(raw: str) -> bool:
    return detect(raw).kind is InputKind.ADDRESS


def is_valid_tx(raw: str) -> bool:
    return detect(raw).kind is InputKind.TX

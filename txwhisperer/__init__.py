"""Format-based blockchain identifier detection and demo contamination check."""

__version__ = "1.0.0"

from txwhisperer.classifiers import (  # noqa: E402
    detect,
    detect_chain,
    detect_input_kind,
    is_valid,
    is_valid_address,
    is_valid_tx,
)
from txwhisperer.contamination.matcher import check_contamination, is_flagged  # noqa: E402
from txwhisperer.models.chain import Chain, Detection, InputKind  # noqa: E402
from txwhisperer.models.contamination import (  # noqa: E402
    ContaminationMatch,
    FlaggedEntry,
    FlaggedTable,
    MatchResult,
)
from txwhisperer.validation.normalize import normalize  # noqa: E402

__all__ = [
    "Chain",
    "ContaminationMatch",
    "Detection",
    "FlaggedEntry",
    "FlaggedTable",
    "InputKind",
    "MatchResult",
    "check_contamination",
    "detect",
    "detect_chain",
    "detect_input_kind",
    "is_flagged",
    "is_valid",
    "is_valid_address",
    "is_valid_tx",
    "normalize",
]

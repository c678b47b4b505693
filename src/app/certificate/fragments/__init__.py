"""Fragment generators, one per certificate section."""

from .adr import AdrFragment
from .pass_or_fail import PassOrFailFragment
from .roadworthiness import RoadworthinessFragment
from .signature import SignatureFragment
from .test_history import TestHistoryFragment
from .vehicle_approval import IvaFragment, MsvaFragment
from .watermark import WatermarkFragment

__all__ = [
    "AdrFragment",
    "IvaFragment",
    "MsvaFragment",
    "PassOrFailFragment",
    "RoadworthinessFragment",
    "SignatureFragment",
    "TestHistoryFragment",
    "WatermarkFragment",
]

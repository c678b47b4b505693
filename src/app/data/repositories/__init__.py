"""Repositories wrapping the remote functions the certificate pipeline reads."""

from .base import FunctionRepository
from .defects import DefectRepository
from .tech_records import TechRecordsRepository
from .test_results import TestResultRepository, odometer_history
from .test_stations import TestStationRepository
from .trailers import TrailerRepository

__all__ = [
    "FunctionRepository",
    "DefectRepository",
    "TechRecordsRepository",
    "TestResultRepository",
    "TestStationRepository",
    "TrailerRepository",
    "odometer_history",
]

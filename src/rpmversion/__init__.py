"""
RPM Version Module

Provides RPM version comparison, EVR parsing and dependency requirement
matching.
"""

from .parser import ParseError, parse_dep_requirement, parse_evr
from .requirements import DepOrdering, DepRequirement, satisfies
from .rpm_utils import EVR, MAX_EPOCH, compare_evr, vercmp

__all__ = [
    "EVR",
    "MAX_EPOCH",
    "DepOrdering",
    "DepRequirement",
    "ParseError",
    "compare_evr",
    "parse_dep_requirement",
    "parse_evr",
    "satisfies",
    "vercmp",
]

__version__ = "1.0.0"

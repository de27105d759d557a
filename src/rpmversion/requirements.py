"""
Dependency Requirements

Models RPM dependency expressions such as ``foo >= 1.2-3`` and decides
whether two of them can be satisfied together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .rpm_utils import EVR, compare_evr

logger = logging.getLogger(__name__)


class DepOrdering(Enum):
    """Comparison operator of a dependency, including <= and >=."""

    LT = "<"
    LTE = "<="
    EQ = "="
    GTE = ">="
    GT = ">"

    def __str__(self) -> str:
        return self.value

    def is_less_class(self) -> bool:
        return self in (DepOrdering.LT, DepOrdering.LTE)

    def is_equal_class(self) -> bool:
        return self in (DepOrdering.EQ, DepOrdering.GTE, DepOrdering.LTE)

    def is_greater_class(self) -> bool:
        return self in (DepOrdering.GT, DepOrdering.GTE)


@dataclass(frozen=True)
class DepRequirement:
    """
    A package name with an optional version constraint.

    Attributes:
        name: Package (or capability) name
        constraint: (operator, EVR) pair, or None when any version matches
    """

    name: str
    constraint: Optional[Tuple[DepOrdering, EVR]] = None

    @property
    def operator(self) -> Optional[DepOrdering]:
        """Return the constraint operator, if any."""
        return self.constraint[0] if self.constraint else None

    @property
    def evr(self) -> Optional[EVR]:
        """Return the constraint EVR, if any."""
        return self.constraint[1] if self.constraint else None

    def __str__(self) -> str:
        if self.constraint is None:
            return self.name
        operator, evr = self.constraint
        return f"{self.name} {operator} {evr}"

    def satisfies(self, other: DepRequirement) -> bool:
        """Return True if this requirement and other can both hold."""
        return satisfies(self, other)


def _same_epoch_version(evr1: EVR, evr2: EVR) -> bool:
    # Versions must be spelled the same, not just compare equal
    return (
        (evr1.epoch or 0) == (evr2.epoch or 0)
        and evr1.version == evr2.version
    )


def _bridges_release(
    operator: DepOrdering, bare: EVR, released: EVR
) -> bool:
    """
    Check the release-less matching rule.

    A bound of =, >= or <= on a version without a release matches every
    release of that same epoch and version, whatever the other operator.
    When both sides lack a release the normal rules apply.
    """
    return (
        not bare.release
        and bool(released.release)
        and operator.is_equal_class()
        and _same_epoch_version(bare, released)
    )


def satisfies(req1: DepRequirement, req2: DepRequirement) -> bool:
    """
    Check whether two dependency requirements are compatible.

    Names must match exactly. A requirement without a version
    constraint is compatible with any requirement of the same name.
    Otherwise the two version ranges must overlap.

    Examples:
        x >= 1.0 satisfies x < 1.0-47
        x >= 1.0-1 does not satisfy x < 1.0-1

    Args:
        req1: First requirement
        req2: Second requirement

    Returns:
        True if the requirements overlap
    """
    if req1.name != req2.name:
        return False

    # If either half has no version expression, it's a match
    if req1.constraint is None or req2.constraint is None:
        return True

    o1, v1 = req1.constraint
    o2, v2 = req2.constraint

    if _bridges_release(o1, v1, v2) or _bridges_release(o2, v2, v1):
        logger.debug(f"Release-less match between '{req1}' and '{req2}'")
        return True

    result = compare_evr(v1, v2)
    if result < 0:
        # v1 < v2, true if >[=] v1 or <[=] v2
        return o1.is_greater_class() or o2.is_less_class()
    if result > 0:
        # v1 > v2, true if <[=] v1 or >[=] v2
        return o1.is_less_class() or o2.is_greater_class()

    # Same point, both sides must face the same direction
    return (
        (o1.is_less_class() and o2.is_less_class())
        or (o1.is_equal_class() and o2.is_equal_class())
        or (o1.is_greater_class() and o2.is_greater_class())
    )

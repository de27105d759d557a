"""
RPM Utilities

Provides RPM version string comparison and the Epoch-Version-Release
value type. Implements the segment rules of rpmvercmp: digit runs,
ASCII letter runs and the ``~`` pre-release marker.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

MAX_EPOCH = 0xFFFFFFFF

_SEPARATORS = re.compile(r"[^0-9A-Za-z~]*")
_NUMERIC = re.compile(r"[0-9]*")
_ALPHA = re.compile(r"[A-Za-z]*")
_SEGMENT = re.compile(r"~|[0-9]+|[A-Za-z]+")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_numeric(s1: str, s2: str) -> int:
    """
    Compare two digit runs as integers of any size.

    Leading zeros are dropped, then the longer run wins, then the
    runs are compared character by character.
    """
    s1 = s1.lstrip("0")
    s2 = s2.lstrip("0")
    if len(s1) != len(s2):
        return _cmp(len(s1), len(s2))
    return _cmp(s1, s2)


def vercmp(v1: str, v2: str) -> int:
    """
    Compare two version strings using RPM's comparison algorithm.

    Separator characters (anything that is not an ASCII letter, digit
    or ``~``) only delimit segments and are never compared. A ``~``
    sorts before everything, including the end of the string. A numeric
    segment is always newer than an alphabetic one.

    Examples:
        vercmp("1.0~rc1", "1.0") -> -1
        vercmp("1.0.0", "1.0.a") -> 1
        vercmp("1.0.0", "1_0_0") -> 0

    Returns:
        -1 if v1 < v2
         0 if v1 == v2
         1 if v1 > v2
    """
    i = j = 0
    while True:
        i = _SEPARATORS.match(v1, i).end()
        j = _SEPARATORS.match(v2, j).end()
        end1 = i == len(v1)
        end2 = j == len(v2)

        if end1 and end2:
            return 0

        tilde1 = not end1 and v1[i] == "~"
        tilde2 = not end2 and v2[j] == "~"
        if tilde1 and tilde2:
            i += 1
            j += 1
            continue
        if tilde1:
            return -1
        if tilde2:
            return 1

        if end1:
            return -1
        if end2:
            return 1

        # The first string decides which kind of segment to grab
        segment = _NUMERIC if v1[i].isdigit() else _ALPHA
        prefix1 = segment.match(v1, i).group()
        prefix2 = segment.match(v2, j).group()

        numeric1 = segment is _NUMERIC
        numeric2 = v2[j].isdigit()
        if numeric1 and not numeric2:
            return 1
        if not numeric1 and numeric2:
            return -1

        if numeric1:
            result = _compare_numeric(prefix1, prefix2)
        else:
            result = _cmp(prefix1, prefix2)
        if result != 0:
            return result

        i += len(prefix1)
        j += len(prefix2)


def _version_key(version: str) -> Tuple[Tuple[int, str], ...]:
    """
    Return the segments of a version string in canonical form.

    Two strings have the same key exactly when vercmp() finds them
    equal, which makes the key usable for hashing.
    """
    return tuple(
        (0, token) if token == "~"
        else (2, token.lstrip("0")) if token.isdigit()
        else (1, token)
        for token in _SEGMENT.findall(version)
    )


@total_ordering
@dataclass(frozen=True, eq=False)
class EVR:
    """
    Represents an RPM Epoch-Version-Release.

    Attributes:
        epoch: Package epoch, or None when not given. None compares
            equal to 0 but is kept so the value prints as it was parsed.
        version: Package version string
        release: Package release string, empty when absent
    """

    epoch: Optional[int]
    version: str
    release: str = ""

    def __post_init__(self) -> None:
        """Check the epoch fits in an unsigned 32-bit integer."""
        if self.epoch is not None and not 0 <= self.epoch <= MAX_EPOCH:
            raise ValueError(f"Epoch out of range: {self.epoch}")

    def __str__(self) -> str:
        evr = self.version
        if self.epoch is not None:
            evr = f"{self.epoch}:{evr}"
        if self.release:
            evr = f"{evr}-{self.release}"
        return evr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EVR):
            return NotImplemented
        return compare_evr(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EVR):
            return NotImplemented
        return compare_evr(self, other) < 0

    def __hash__(self) -> int:
        return hash((
            self.epoch or 0,
            _version_key(self.version),
            _version_key(self.release),
        ))


def compare_evr(evr1: EVR, evr2: EVR) -> int:
    """
    Compare two EVR values.

    Epochs are compared first (a missing epoch counts as 0), then
    versions, then releases.

    Returns:
        -1 if evr1 < evr2
         0 if evr1 == evr2
         1 if evr1 > evr2
    """
    # Compare epoch first
    epoch_cmp = _cmp(evr1.epoch or 0, evr2.epoch or 0)
    if epoch_cmp != 0:
        return epoch_cmp

    # Compare version
    version_cmp = vercmp(evr1.version, evr2.version)
    if version_cmp != 0:
        return version_cmp

    # Compare release
    return vercmp(evr1.release, evr2.release)

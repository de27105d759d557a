"""
Version Parser

Parses EVR strings (``[epoch:]version[-release]``) and dependency
requirement strings (``name [op evr]``).
"""

import logging
import re
import unicodedata
from typing import Tuple

from .requirements import DepOrdering, DepRequirement
from .rpm_utils import EVR, MAX_EPOCH

logger = logging.getLogger(__name__)

_VERSION_CHAR = r"[0-9A-Za-z._+%{}~]"

_EVR_PATTERN = re.compile(
    rf"(?:(?P<epoch>[0-9]+):)?(?P<version>{_VERSION_CHAR}+)"
    rf"(?:-(?P<release>{_VERSION_CHAR}+))?"
)

# Check <= and >= first, since they overlap < and >
_OPERATORS = (
    DepOrdering.LTE,
    DepOrdering.GTE,
    DepOrdering.EQ,
    DepOrdering.LT,
    DepOrdering.GT,
)


class ParseError(ValueError):
    """
    Raised when a string is not a valid EVR.

    Attributes:
        text: The input that failed to parse
        reason: Description of the problem
    """

    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


def parse_evr(text: str) -> EVR:
    """
    Parse an EVR string into an EVR object.

    Supported formats:
        version
        version-release
        epoch:version
        epoch:version-release

    Args:
        text: EVR string, e.g. "1:2.0-3.el9"

    Returns:
        EVR object

    Raises:
        ParseError: if the string is malformed or the epoch does not
            fit in an unsigned 32-bit integer
    """
    match = _EVR_PATTERN.fullmatch(text)
    if not match:
        raise ParseError(text, "not in [epoch:]version[-release] form")

    epoch = match.group("epoch")
    if epoch is not None:
        digits = epoch.lstrip("0")
        # Longer than MAX_EPOCH's ten digits is an overflow, whatever the value
        if len(digits) > len(str(MAX_EPOCH)) or int(digits or "0") > MAX_EPOCH:
            raise ParseError(text, f"epoch {epoch} exceeds {MAX_EPOCH}")
        epoch = int(digits or "0")

    return EVR(
        epoch=epoch,
        version=match.group("version"),
        release=match.group("release") or "",
    )


def _is_space(char: str) -> bool:
    """Return True for ASCII whitespace and Unicode space separators."""
    return char in "\t\n\v\f\r" or unicodedata.category(char) == "Zs"


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    return pos


def _parse_constraint(text: str, pos: int) -> Tuple[DepOrdering, EVR]:
    """Parse "op evr" starting at pos, which must run to end of text."""
    for operator in _OPERATORS:
        if text.startswith(operator.value, pos):
            break
    else:
        raise ParseError(text, f"no comparison operator at offset {pos}")

    pos = _skip_spaces(text, pos + len(operator.value))
    return operator, parse_evr(text[pos:])


def parse_dep_requirement(text: str) -> DepRequirement:
    """
    Parse a dependency requirement such as "foo >= 1.2-3".

    If the part after the name is not a valid version constraint, the
    whole input is used as the name with no constraint. RPMs with bad
    version strings in Requires exist, and this way they still match
    against the full string. This function never raises ParseError.

    Args:
        text: Requirement string

    Returns:
        DepRequirement object
    """
    pos = 0
    while pos < len(text) and not _is_space(text[pos]):
        pos += 1
    name = text[:pos]

    pos = _skip_spaces(text, pos)
    if pos == len(text):
        # Nothing but the name; trailing whitespace stays part of it
        return DepRequirement(text)

    try:
        constraint = _parse_constraint(text, pos)
    except ParseError as e:
        logger.debug(f"Using '{text}' as a plain name: {e.reason}")
        return DepRequirement(text)

    return DepRequirement(name, constraint)

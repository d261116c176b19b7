"""
Token-level validation rules for mission text.

These predicates decide whether a single token or line fragment is
well-formed. They never raise; the parser turns a failed check into a
ParseError with the appropriate context.
"""

import re
from typing import Optional

from .models import Direction

# Optional sign followed by ASCII digits only: no whitespace, underscores,
# decimal points or non-ASCII digits
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INSTRUCTIONS_PATTERN = re.compile(r"[LRM]+")
HEADING_CODES = frozenset(direction.value for direction in Direction)


def parse_int_token(token: str) -> Optional[int]:
    """Integer value of ``token``, or None when it is not a plain integer."""
    if not INTEGER_PATTERN.fullmatch(token):
        return None
    return int(token)


def parse_heading_token(token: str) -> Optional[Direction]:
    """Direction for an exact, case-sensitive heading code, else None."""
    if token not in HEADING_CODES:
        return None
    return Direction(token)


def is_valid_instruction_string(instructions: str) -> bool:
    """True when ``instructions`` is one or more of L, R, M and nothing else."""
    return INSTRUCTIONS_PATTERN.fullmatch(instructions) is not None


def is_blank(line: Optional[str]) -> bool:
    """True for missing, empty or whitespace-only lines."""
    return line is None or not line.strip()

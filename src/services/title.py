"""Title Normalizer

Title-cases movie titles, keeping short Hindi and English connector words
lowercase unless they open the title.
"""

from typing import Any, List

from constants import MINOR_WORDS
from core.logging import get_logger
from records.parser import parse_title
from result import map_result, unwrap_or

logger = get_logger(__name__)


def case_tokens(tokens: List[str]) -> List[str]:
    """Apply title casing to already-split tokens."""
    cased = []
    for position, token in enumerate(tokens):
        word = token.lower()
        if position > 0 and word in MINOR_WORDS:
            cased.append(word)
        else:
            cased.append(word[:1].upper() + word[1:])
    return cased


def normalize_title(raw: Any) -> str:
    """Normalize spacing and casing of a title.

    Args:
        raw: Title as typed by a user

    Returns:
        The normalized title, or "" if raw is not a string or is blank

    Examples:
        >>> normalize_title("  DIL   SE  ")
        'Dil se'
        >>> normalize_title("the GOOD the bad AUR the ugly")
        'The Good the Bad aur the Ugly'
    """
    parsed = parse_title(raw)
    if not parsed["ok"]:
        logger.debug("Rejected title: {}", parsed["error"])

    return unwrap_or(map_result(parsed, lambda tokens: " ".join(case_tokens(tokens))), "")

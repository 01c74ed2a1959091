"""Title normalization for similarity comparison.

Reduces a free-text event title to a canonical form so that casing,
punctuation and spacing differences never count as dissimilarity.
"""

import re

from event_similarity.errors import InvalidArgumentError

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Normalize an event title for matching purposes.

    Steps:
        1. Lowercase the text
        2. Strip every character that is neither a word character nor
           whitespace (punctuation, symbols, emoji)
        3. Collapse whitespace runs to a single space
        4. Trim leading/trailing whitespace

    The function is total over strings and idempotent.  The result may be
    empty when the title consists only of punctuation and whitespace.

    Args:
        title: Raw title as submitted by the organizer.

    Returns:
        Normalized title string.

    Raises:
        InvalidArgumentError: If ``title`` is not a string.
    """
    if not isinstance(title, str):
        raise InvalidArgumentError(
            f"title must be a string, got {type(title).__name__}"
        )

    result = title.lower().strip()
    result = _NON_WORD.sub("", result)
    result = _WHITESPACE.sub(" ", result)
    return result.strip()

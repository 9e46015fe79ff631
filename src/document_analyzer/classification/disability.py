"""Keyword-based disability classification of document text."""

import re
from enum import Enum


class DisabilityType(str, Enum):
    """Coarse classification derived from keywords in a document."""

    BLIND = "blind"
    DEAF = "deaf"
    NORMAL = "normal"


# Checked in order; the first pattern that matches wins.
_BLIND_PATTERN = re.compile(r"\b(blind|blindness)\b")
_DEAF_PATTERN = re.compile(r"\b(deaf|hearing impaired)\b")


def determine_disability_type(text: str) -> DisabilityType:
    """Classifies text as blind, deaf or normal by whole-word keyword matching.

    Blindness keywords take priority over deafness keywords.

    Args:
        text (str): The raw text of the document, in any case.

    Returns:
        DisabilityType: The first matching classification, or NORMAL.
    """
    lowered = text.lower()
    if _BLIND_PATTERN.search(lowered):
        return DisabilityType.BLIND
    if _DEAF_PATTERN.search(lowered):
        return DisabilityType.DEAF
    return DisabilityType.NORMAL

# pet_identity_validator/shared/utils/text_utils.py

"""Text processing utilities for comparing document text with pet records"""

# Standard library imports
from re import split
from re import sub

# Third party imports
from unidecode import unidecode


def ascii_fold(text: str) -> str:
    """Convert accented characters to their ASCII equivalents

    Uses the unidecode library, so "Zoë" and "Zoe" compare as identical
    when folding is enabled.

    Args:
        text: Input text with potential accented characters

    Returns:
        Text with accented characters converted to ASCII
    """
    if not text:
        return ""
    return unidecode(text)


def normalize_for_comparison(text: str, fold_unicode: bool = False) -> str:
    """Trim, lower-case and optionally ASCII-fold a value before comparison

    Args:
        text: Raw value from a document or pet record
        fold_unicode: Whether to fold accented characters to ASCII

    Returns:
        Normalized text
    """
    if not text:
        return ""
    normalized = text.strip()
    if fold_unicode:
        normalized = ascii_fold(normalized)
    return normalized.lower()


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character (spaces, tabs, newlines)"""
    return sub(r"\s", "", text or "")


def split_tokens(text: str) -> list[str]:
    """Split on runs of whitespace, dropping empty tokens"""
    return [token for token in split(r"\s+", (text or "").strip()) if token]

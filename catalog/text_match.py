"""
Text matching helpers.
Normalizes free-text criteria and performs case-insensitive substring matching.
"""

from typing import Optional


def normalize_criterion(text: Optional[str]) -> Optional[str]:
	"""
	Trim a text criterion; None, empty and whitespace-only input all become None
	so that callers have a single representation for "not supplied".
	"""
	if text is None:  # not supplied at all
		return None
	stripped = text.strip()  # drop surrounding spaces/tabs/newlines
	return stripped or None  # '' after trimming means absent


def fold(text: str) -> str:
	"""Unicode-aware case folding (handles e.g. 'ß' -> 'ss')."""
	return text.casefold()


def contains_folded(haystack: Optional[str], needle: str) -> bool:
	"""Return True if needle occurs in haystack, ignoring case."""
	if haystack is None:
		return False
	return fold(needle) in fold(haystack)

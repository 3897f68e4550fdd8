"""
Data models for the Movie Catalog.
Defines the record and query structures shared by the store, the engine and the API.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__
# Import typing helpers for precise and self-documenting types
from typing import Optional  # optional criteria

from .text_match import normalize_criterion  # whitespace-only text -> absent


def is_valid_movie_id(value) -> bool:
	"""True for positive ints; bools (an int subclass) and floats never name a movie."""
	return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie in the catalog.
	Frozen: records are shared between the store and every query result.
	"""
	id: int  # unique positive identifier
	movie_name: str  # display title, e.g. "The Prison Escape"
	director: str  # director's name as stored in the source
	year: int  # release year (e.g., 1994)
	genre: str  # free-text genre label, e.g. "Crime/Drama"
	description: str  # short synopsis
	duration: int  # running time in minutes
	imdb_rating: float  # rating, conventionally 0.0-10.0 (not validated here)


@dataclass(frozen=True)
class SearchCriteria:
	"""
	The three optional filter dimensions of a catalog search.
	None means "criterion not supplied"; text criteria are stored trimmed.
	"""
	name: Optional[str] = None  # case-insensitive substring of movie_name
	id: Optional[int] = None  # exact identifier
	genre: Optional[str] = None  # case-insensitive substring of genre

	@classmethod
	def from_raw(cls, name: Optional[str] = None, movie_id: Optional[int] = None, genre: Optional[str] = None) -> 'SearchCriteria':
		"""Build criteria from caller input, treating empty/whitespace text as absent."""
		return cls(
			name=normalize_criterion(name),
			id=movie_id,
			genre=normalize_criterion(genre),
		)

	def is_empty(self) -> bool:
		return self.name is None and self.id is None and self.genre is None

	def describe(self) -> str:
		return f"name='{self.name}' id={self.id} genre='{self.genre}'"

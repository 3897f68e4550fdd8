"""
Search engine module.
Answers identifier lookups and multi-criteria filter queries over a CatalogStore.
"""

from typing import List, Optional, Tuple  # type annotations for clarity

# Import project modules for data structures and components
from .models import Movie, SearchCriteria, is_valid_movie_id  # core data classes, id check
from .catalog_store import CatalogStore  # immutable movie collection
from .text_match import contains_folded, normalize_criterion  # case-insensitive matching

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	High-level query API over an injected CatalogStore.
	Stateless between calls: every result depends only on the store and the arguments.
	"""
	def __init__(self, store: CatalogStore):
		self.store = store  # read-only catalog shared with the caller
		logger.info(f"[Engine] Ready over {store.size()} movies")

	def get_all_movies(self) -> Tuple[Movie, ...]:
		"""Return every movie in catalog order."""
		return self.store.get_all()

	def get_movie_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""Return one movie, or None for missing/non-positive/unknown ids."""
		return self.store.get_by_id(movie_id)

	def search_movies(
		self,
		name: Optional[str] = None,  # partial, case-insensitive title match
		movie_id: Optional[int] = None,  # exact id match
		genre: Optional[str] = None,  # partial, case-insensitive genre match
	) -> List[Movie]:
		"""
		Filter the catalog by every supplied criterion (logical AND).
		A query with no usable criteria matches nothing rather than everything.
		"""
		logger.info(f"[Engine] Search requested | name='{name}' id={movie_id} genre='{genre}'")

		criteria = SearchCriteria.from_raw(name=name, movie_id=movie_id, genre=genre)  # normalize input
		if criteria.is_empty():
			logger.warning("[Engine] No search criteria provided; returning no movies")
			return []

		results = self.search(criteria)

		if results:
			noun = "movie" if len(results) == 1 else "movies"
			logger.info(f"[Engine] Found {len(results)} {noun} for {criteria.describe()}")
		else:
			logger.info(f"[Engine] No movies found for {criteria.describe()}")
		return results

	def search(self, criteria: SearchCriteria) -> List[Movie]:
		"""Run the filter loop for already-normalized criteria, preserving catalog order."""
		results: List[Movie] = []  # accumulator
		for movie in self.store.get_all():
			# Exact id filter: integer equality; a supplied but invalid id (bool, float, <= 0) matches nothing
			if criteria.id is not None and (not is_valid_movie_id(criteria.id) or movie.id != criteria.id):
				continue
			# Name filter: case-insensitive substring
			if criteria.name is not None and not contains_folded(movie.movie_name, criteria.name):
				continue
			# Genre filter: case-insensitive substring
			if criteria.genre is not None and not contains_folded(movie.genre, criteria.genre):
				continue
			results.append(movie)
		logger.debug(f"[Engine] {criteria.describe()} matched ids={[m.id for m in results]}")
		return results

	def search_movies_by_name(self, name: Optional[str]) -> List[Movie]:
		"""Shortcut for a name-only search; blank names return nothing."""
		if normalize_criterion(name) is None:
			logger.warning("[Engine] Empty movie name provided for search")
			return []
		return self.search_movies(name=name)

	def search_movies_by_genre(self, genre: Optional[str]) -> List[Movie]:
		"""Shortcut for a genre-only search; blank genres return nothing."""
		if normalize_criterion(genre) is None:
			logger.warning("[Engine] Empty genre provided for search")
			return []
		return self.search_movies(genre=genre)

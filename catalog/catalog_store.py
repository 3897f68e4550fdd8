"""
Catalog store module.
Holds the immutable, ordered collection of movies and an identifier index for O(1) lookups.
"""

from pathlib import Path  # path handling for the JSON bootstrap
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple  # type hints

from .models import Movie, is_valid_movie_id  # movie data class, id check
from .data_loader import DataLoader  # raw source -> Movie records

from loguru import logger  # console logger


class CatalogStore:
	"""
	Read-only catalog of movies.
	Built once; afterwards nothing mutates it, so concurrent readers need no locking.
	"""

	def __init__(self, movies: Iterable[Movie] = ()):
		"""
		Keep the movies in source order and index them by identifier.
		Duplicate identifiers: the later record wins in the index, both stay in get_all().
		"""
		self._movies: Tuple[Movie, ...] = tuple(movies)  # ordered, immutable view
		self._movies_map: Dict[int, Movie] = {}  # movie_id -> Movie

		for movie in self._movies:
			if movie.id in self._movies_map:
				logger.warning(
					f"[Store] Duplicate movie id {movie.id}: '{movie.movie_name}' replaces '{self._movies_map[movie.id].movie_name}' in the index"
				)
			self._movies_map[movie.id] = movie

		logger.info(f"[Store] Catalog ready | movies={len(self._movies)} | indexed_ids={len(self._movies_map)}")

	@classmethod
	def from_records(cls, records: Iterable[Mapping[str, Any]], loader: Optional[DataLoader] = None) -> 'CatalogStore':
		"""Build a store from already-parsed raw records (empty on malformed input)."""
		loader = loader or DataLoader()
		return cls(loader.load_movies_from_records(records))

	@classmethod
	def from_json_file(cls, filepath, loader: Optional[DataLoader] = None) -> 'CatalogStore':
		"""Build a store from a JSON file (empty if the file is missing or malformed)."""
		loader = loader or DataLoader()
		return cls(loader.load_movies_from_json(Path(filepath)))

	def get_all(self) -> Tuple[Movie, ...]:
		"""Return every movie in catalog order (shared, not copied)."""
		return self._movies

	def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""Return the movie with this id, or None for absent, non-positive or unknown ids."""
		if not is_valid_movie_id(movie_id):  # None, bool, non-int or non-positive
			return None
		return self._movies_map.get(movie_id)

	def ids(self) -> List[int]:
		"""Return the distinct indexed identifiers in first-seen order."""
		return list(self._movies_map)

	def size(self) -> int:
		return len(self._movies)

	def __len__(self) -> int:
		return len(self._movies)

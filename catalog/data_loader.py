"""
Data loading module.
Turns the raw catalog source (a JSON array of movie objects) into Movie records.
Loading never raises: any failure is logged and produces an empty catalog.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read the JSON array
from typing import Any, Dict, Iterable, List, Mapping  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class MalformedRecordError(ValueError):
	"""Raised internally when a raw record does not follow the ingestion contract."""


class DataLoader:
	"""
	Handles loading and validating movie data.
	"""

	# Source field name -> (Movie attribute, expected kind)
	FIELDS = (
		('id', 'id', 'int'),
		('movieName', 'movie_name', 'str'),
		('director', 'director', 'str'),
		('year', 'year', 'int'),
		('genre', 'genre', 'str'),
		('description', 'description', 'str'),
		('duration', 'duration', 'int'),
		('imdbRating', 'imdb_rating', 'float'),
	)

	def load_movies_from_json(self, filepath) -> List[Movie]:
		"""
		Load movies from a JSON file holding an array of movie objects.
		Returns an empty list (and logs the reason) if the file is missing or malformed.
		"""
		filepath = Path(filepath)  # normalize path

		# A missing source is not fatal; callers get an empty catalog
		if not filepath.exists():
			logger.error(f"[Loader] Movie data file not found: {filepath}")
			return []

		logger.info(f"[Loader] Loading movies from {filepath}...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8') as f:
				data = json.load(f)  # whole array at once; the catalog is small
		except json.JSONDecodeError as e:
			logger.error(f"[Loader] Failed to parse {filepath}: {e}")
			return []
		except (OSError, UnicodeDecodeError) as e:
			logger.error(f"[Loader] Failed to read {filepath}: {e}")
			return []
		except RecursionError as e:  # nesting deeper than the decoder can follow
			logger.error(f"[Loader] Failed to parse {filepath}: {e}")
			return []

		if not isinstance(data, list):  # contract: top level is an array
			logger.error(f"[Loader] Expected a JSON array in {filepath}, got {type(data).__name__}")
			return []

		return self.load_movies_from_records(data)

	def load_movies_from_records(self, records: Iterable[Mapping[str, Any]]) -> List[Movie]:
		"""
		Convert already-parsed raw records into Movie objects, preserving order.
		All-or-nothing: one malformed record empties the result.
		"""
		movies: List[Movie] = []  # accumulator for parsed Movie objects
		try:
			for position, data in enumerate(records):  # keep position for diagnostics
				try:
					movies.append(self._parse_movie_data(data))
				except MalformedRecordError as e:
					raise MalformedRecordError(f"record #{position}: {e}") from e
		except (MalformedRecordError, TypeError) as e:
			logger.error(f"[Loader] Failed to load movies: {e}")
			return []

		logger.info(f"[Loader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def _parse_movie_data(self, data: Mapping[str, Any]) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		"""
		if not isinstance(data, Mapping):
			raise MalformedRecordError(f"expected an object, got {type(data).__name__}")

		values: Dict[str, Any] = {}
		for source_key, attr, kind in self.FIELDS:
			if source_key not in data:
				raise MalformedRecordError(f"missing field '{source_key}'")
			values[attr] = self._coerce(source_key, data[source_key], kind)
		return Movie(**values)

	def _coerce(self, key: str, value: Any, kind: str) -> Any:
		# bool is a subclass of int; JSON true/false is never a valid number here
		if isinstance(value, bool):
			raise MalformedRecordError(f"field '{key}' must be {kind}, got bool")
		if kind == 'str':
			if not isinstance(value, str):
				raise MalformedRecordError(f"field '{key}' must be str, got {type(value).__name__}")
			return value
		if kind == 'int':
			if isinstance(value, int):
				return value
			if isinstance(value, float) and value.is_integer():  # e.g. 142.0
				return int(value)
			raise MalformedRecordError(f"field '{key}' must be int, got {value!r}")
		# float
		if isinstance(value, (int, float)):
			return float(value)
		raise MalformedRecordError(f"field '{key}' must be a number, got {value!r}")

	def get_all_directors(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique director names in the dataset."""
		return sorted({m.director for m in movies if m.director})

	def get_all_genres(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique genre labels in the dataset."""
		return sorted({m.genre for m in movies if m.genre})

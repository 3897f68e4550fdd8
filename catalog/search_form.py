"""
Search form handling shared by the API and the Streamlit UI.
Validates the raw id text, runs the search and picks the user-facing message.
"""

from dataclasses import dataclass  # result container
from typing import Optional, Sequence  # type hints

from .models import Movie  # record type
from .search_engine import SearchEngine  # query engine
from .text_match import normalize_criterion  # blank text -> None

from loguru import logger  # console logger

MSG_INVALID_ID_FORMAT = "Invalid movie ID format. Use numbers only."
MSG_INVALID_ID = "Invalid movie ID. Movie IDs must be greater than 0."
MSG_NO_CRITERIA = "Provide at least one search criterion."
MSG_NO_MATCHES = "No movies found matching your search."


def found_message(count: int) -> str:
	return "Found 1 movie." if count == 1 else f"Found {count} movies."


@dataclass
class SearchOutcome:
	movies: Sequence[Movie]  # results, or the whole catalog when the id was invalid
	search_name: str = ""  # echo of the name field
	search_id: str = ""  # echo of the id field ('' when invalid)
	search_genre: str = ""  # echo of the genre field
	search_message: Optional[str] = None  # result summary
	search_error: Optional[str] = None  # validation problem


def run_search_form(
	engine: SearchEngine,
	name: Optional[str] = None,
	id_text: Optional[str] = None,
	genre: Optional[str] = None,
) -> SearchOutcome:
	"""
	Turn raw form input into a SearchOutcome.
	An unusable id falls back to the full catalog with an error, like the original search page.
	"""
	echo_name, echo_genre = name or "", genre or ""

	movie_id: Optional[int] = None
	cleaned_id = normalize_criterion(id_text)
	if cleaned_id is not None:
		try:
			movie_id = int(cleaned_id)
		except ValueError:
			logger.warning(f"[Form] Invalid movie ID format: {id_text!r}")
			return SearchOutcome(
				movies=engine.get_all_movies(),
				search_name=echo_name,
				search_genre=echo_genre,
				search_error=MSG_INVALID_ID_FORMAT,
			)
		if movie_id <= 0:
			logger.warning(f"[Form] Invalid movie ID provided: {movie_id}")
			return SearchOutcome(
				movies=engine.get_all_movies(),
				search_name=echo_name,
				search_genre=echo_genre,
				search_error=MSG_INVALID_ID,
			)

	results = engine.search_movies(name=name, movie_id=movie_id, genre=genre)  # delegate

	outcome = SearchOutcome(
		movies=results,
		search_name=echo_name,
		search_id=str(movie_id) if movie_id is not None else "",
		search_genre=echo_genre,
	)
	if results:
		outcome.search_message = found_message(len(results))
	elif movie_id is None and normalize_criterion(name) is None and normalize_criterion(genre) is None:
		outcome.search_error = MSG_NO_CRITERIA
	else:
		outcome.search_message = MSG_NO_MATCHES
	return outcome

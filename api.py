"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /movies: every movie in catalog order
- GET /movies/search?name=...&id=...&genre=...: filter search with user-facing messages
- GET /movies/{movie_id}: one movie or 404
- GET /genres: distinct genre labels

Startup loads the JSON catalog once (CATALOG_DATA_PATH) and keeps the engine on app.state.
"""

# Import standard libraries for timing
import time  # measure startup latency
from pathlib import Path  # path-safe filesystem handling
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query, Request  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and search
from catalog.catalog_store import CatalogStore  # immutable movie collection
from catalog.data_loader import DataLoader  # JSON -> Movie records
from catalog.logging_setup import configure_logging  # loguru sink setup
from catalog.models import Movie  # record type
from catalog.search_engine import SearchEngine  # query engine
from catalog.search_form import run_search_form  # id validation + messages
from catalog.settings import CATALOG_DATA_PATH  # default data source

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	movie_name: str  # human-readable title
	director: str  # director name
	year: int  # release year
	genre: str  # genre label
	description: str  # synopsis
	duration: int  # minutes
	imdb_rating: float  # rating

	@classmethod
	def from_movie(cls, movie: Movie) -> 'MovieOut':
		return cls(
			id=movie.id,
			movie_name=movie.movie_name,
			director=movie.director,
			year=movie.year,
			genre=movie.genre,
			description=movie.description,
			duration=movie.duration,
			imdb_rating=movie.imdb_rating,
		)


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	movies: List[MovieOut]  # results (or the full catalog when the input was invalid)
	search_performed: bool = True  # always true for this endpoint
	search_name: str = ""  # echo of the name field
	search_id: str = ""  # echo of the id field ('' when invalid)
	search_genre: str = ""  # echo of the genre field
	search_message: Optional[str] = None  # result summary
	search_error: Optional[str] = None  # validation problem


def _movies_out(movies) -> List[MovieOut]:
	return [MovieOut.from_movie(m) for m in movies]


def create_app(data_path: Optional[Path] = None) -> FastAPI:
	"""Build the FastAPI application; the catalog is loaded in the startup hook."""
	# Instantiate the FastAPI application with metadata
	app = FastAPI(title="Movie Catalog API", version="1.0.0")  # web app
	app.state.engine = None  # set on startup
	app.state.startup_seconds = 0.0
	source = Path(data_path) if data_path is not None else CATALOG_DATA_PATH

	# FastAPI startup hook to initialize the engine once
	@app.on_event("startup")
	async def startup_event():
		"""Load the catalog and build the query engine."""
		start = time.time()  # start timer for startup latency
		logger.info(f"[API] Startup: loading catalog from {source}...")  # log intent

		store = CatalogStore.from_json_file(source, loader=DataLoader())  # empty on failure
		app.state.engine = SearchEngine(store)

		app.state.startup_seconds = time.time() - start  # elapsed seconds
		logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s with {store.size()} movies.")

	def get_engine(request: Request) -> SearchEngine:
		engine = request.app.state.engine
		if engine is None:  # engine must be ready to serve
			logger.warning("[API] Request received but engine not initialized")
			raise HTTPException(status_code=503, detail="Catalog not loaded yet.")
		return engine

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health(request: Request):
		"""Return minimal health info for liveness/readiness probes."""
		engine = request.app.state.engine
		return {
			"status": "ok",  # constant indicator
			"engine_ready": engine is not None,  # True if engine initialized
			"movie_count": engine.store.size() if engine is not None else 0,
			"startup_seconds": round(request.app.state.startup_seconds, 2),  # startup latency
		}

	@app.get("/movies", response_model=List[MovieOut])
	async def list_movies(request: Request):
		"""Return the whole catalog in source order."""
		engine = get_engine(request)
		logger.info("[API] /movies requested")
		return _movies_out(engine.get_all_movies())

	# Declared before /movies/{movie_id} so 'search' is not read as an id
	@app.get("/movies/search", response_model=SearchResponse)
	async def search_movies(
		request: Request,
		name: Optional[str] = Query(None, description="Part of the movie name"),
		raw_id: Optional[str] = Query(None, alias="id", description="Exact movie id"),
		genre: Optional[str] = Query(None, description="Part of the genre"),
	):
		"""Filter the catalog and describe the outcome for the search form."""
		engine = get_engine(request)
		logger.info(f"[API] /movies/search name='{name}' id={raw_id} genre='{genre}'")

		outcome = run_search_form(engine, name=name, id_text=raw_id, genre=genre)
		return SearchResponse(
			movies=_movies_out(outcome.movies),
			search_name=outcome.search_name,
			search_id=outcome.search_id,
			search_genre=outcome.search_genre,
			search_message=outcome.search_message,
			search_error=outcome.search_error,
		)

	@app.get("/movies/{movie_id}", response_model=MovieOut, responses={404: {"description": "The movie was not found"}})
	async def movie_details(movie_id: int, request: Request):
		"""Return one movie by id."""
		engine = get_engine(request)
		logger.info(f"[API] Fetching details for movie ID: {movie_id}")
		movie = engine.get_movie_by_id(movie_id)
		if movie is None:
			logger.warning(f"[API] Movie with ID {movie_id} not found")
			raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")
		return MovieOut.from_movie(movie)

	@app.get("/genres", response_model=List[str])
	async def list_genres(request: Request):
		"""Return the distinct genre labels, sorted."""
		engine = get_engine(request)
		return DataLoader().get_all_genres(list(engine.get_all_movies()))

	return app


configure_logging()  # entry point: uvicorn api:app --reload
app = create_app()

"""
Streamlit UI for the Movie Catalog.
Calls the FastAPI server (CATALOG_API_URL, default http://localhost:8000) for searches,
or runs locally by loading the JSON catalog like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# dataclass -> dict for rendering, typing for clearer signatures
from dataclasses import asdict  # Movie -> plain dict
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from catalog.catalog_store import CatalogStore  # load movies from file
from catalog.logging_setup import configure_logging  # loguru sink setup
from catalog.search_engine import SearchEngine  # lookups + filter search
from catalog.search_form import run_search_form  # same validation and messages as the API
from catalog.settings import CATALOG_API_URL, CATALOG_DATA_PATH  # defaults

configure_logging()  # entry point: streamlit run streamlit_app.py

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog")  # friendly header

# Cache the local engine so we only read the catalog once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> SearchEngine:
	"""Create a local SearchEngine over the JSON catalog (empty if the file is unusable)."""
	store = CatalogStore.from_json_file(CATALOG_DATA_PATH)
	return SearchEngine(store)


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", CATALOG_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

local_engine: Optional[SearchEngine] = None  # placeholder
if use_local or not api_available:
	local_engine = init_local_engine()
	st.sidebar.success(f"Local engine ready ({local_engine.store.size()} movies).")

# Search form: three optional criteria
col1, col2, col3 = st.columns([3, 1, 2])
with col1:
	name = st.text_input("Movie name", placeholder="e.g., prison")
with col2:
	id_text = st.text_input("Movie ID", placeholder="e.g., 1")
with col3:
	genre = st.text_input("Genre", placeholder="e.g., drama")
search_btn = st.button("Search", type="primary")  # triggers a search

if search_btn:
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				outcome = run_search_form(local_engine, name=name, id_text=id_text, genre=genre)
				payload = {
					"movies": [asdict(m) for m in outcome.movies],  # same keys as the API's MovieOut
					"search_message": outcome.search_message,
					"search_error": outcome.search_error,
				}
			else:
				# API mode: call the server and let it validate and search
				resp = requests.get(f"{api_url}/movies/search", params={"name": name, "id": id_text, "genre": genre}, timeout=30)
				resp.raise_for_status()  # raise error if server responded with an error code
				payload = resp.json()  # parse JSON returned by API

			if payload.get("search_error"):
				st.error(payload["search_error"])
			elif payload.get("search_message"):
				st.success(payload["search_message"])
			st.divider()  # visual separator

			# Render each movie as a details row
			for movie in payload.get("movies", []):
				st.subheader(f"{movie['movie_name']} ({movie['year']})")  # title + year
				st.caption(f"#{movie['id']} | {movie['genre']} | {movie['duration']} min | IMDb {movie['imdb_rating']}")
				st.write(f"Director: {movie['director']}")  # director
				st.write(movie['description'])  # synopsis
				st.divider()  # separator

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from genre_recommendation.applications.interfaces.dtos.message import Message
from genre_recommendation.infrastructure.config.dependencies import get_settings, load_catalog
from genre_recommendation.infrastructure.logging.logger import Logger, setup_logging
from genre_recommendation.presentation.routers import movies, recommendations

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    # Catalog must be loaded before the first request
    catalog = load_catalog(settings.catalog_path)
    logger.info(f"Data loaded. {len(catalog)} movies available from {settings.catalog_path}")
    yield


app = FastAPI(title="Genre Recommendation API", lifespan=lifespan)

app.include_router(movies.router)
app.include_router(recommendations.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Pick a movie you like and get recommendations by shared genres."}

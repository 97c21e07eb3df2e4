import json
import os
from typing import Any, List

import pandas as pd
from pydantic import TypeAdapter, ValidationError

from genre_recommendation.domain.exceptions import CatalogLoadError, ConfigurationError
from genre_recommendation.domain.models.movie import Movie
from genre_recommendation.infrastructure.adapters.repositories.in_memory_movie_repository import (
    InMemoryMovieRepository,
)
from genre_recommendation.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

# MovieLens marks movies without genres with this placeholder
NO_GENRES = "(no genres listed)"

_movie_list_adapter = TypeAdapter(List[Movie])


class FileMovieRepository(InMemoryMovieRepository):
    """Catalog read once from a JSON or MovieLens file and served from memory.

    Supported formats:
        .json  list of {"id", "title", "genres"} records, or {"movies": [...]}
        .dat   MovieLens 1M style "id::title::Genre1|Genre2", no header
        .csv   MovieLens latest style with movieId,title,genres header
    """

    SUPPORTED_EXTENSIONS = (".json", ".dat", ".csv")

    def __init__(self, catalog_path: str):
        self.catalog_path = catalog_path
        super().__init__(self.load())

    def load(self) -> List[Movie]:
        extension = os.path.splitext(self.catalog_path)[1].lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise ConfigurationError(
                f"Unsupported catalog format '{extension}' for {self.catalog_path}, "
                f"expected one of {', '.join(self.SUPPORTED_EXTENSIONS)}"
            )

        try:
            if extension == ".json":
                records = self._read_json()
            else:
                records = self._read_movielens(extension)
        except (OSError, ValueError) as e:
            raise CatalogLoadError(f"Failed to read movie catalog from {self.catalog_path}: {e}") from e

        try:
            movies = _movie_list_adapter.validate_python(records)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Malformed movie records in {self.catalog_path}: {e.error_count()} validation error(s)"
            ) from e

        logger.info(f"Loaded {len(movies)} movies from {self.catalog_path}")
        return movies

    def _read_json(self) -> Any:
        with open(self.catalog_path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            if "movies" not in data:
                raise ValueError("JSON object catalog must hold its records under a 'movies' key")
            data = data["movies"]
        return data

    def _read_movielens(self, extension: str) -> List[dict]:
        if extension == ".dat":
            df = pd.read_csv(
                self.catalog_path,
                sep="::",
                header=None,
                engine="python",
                names=["id", "title", "genres"],
                encoding="latin-1",
            )
        else:
            df = pd.read_csv(self.catalog_path).rename(columns={"movieId": "id"})
            missing = {"id", "title", "genres"} - set(df.columns)
            if missing:
                raise ValueError(f"missing columns: {', '.join(sorted(missing))}")

        df["genres"] = df["genres"].fillna("").astype(str).apply(self._split_genres)
        return df[["id", "title", "genres"]].to_dict(orient="records")

    @staticmethod
    def _split_genres(value: str) -> List[str]:
        if not value or value == NO_GENRES:
            return []
        return value.split("|")

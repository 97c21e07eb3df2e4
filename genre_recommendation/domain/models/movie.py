from typing import List

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    genres: List[str]

from abc import ABC, abstractmethod
from typing import List, Optional

from genre_recommendation.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

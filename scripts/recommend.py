import argparse
import asyncio
import sys

from genre_recommendation.applications.services.recommendation_application_service import (
    RecommendationApplicationService,
)
from genre_recommendation.applications.services.recommendation_presenter import RecommendationPresenter
from genre_recommendation.domain.exceptions import DomainError
from genre_recommendation.infrastructure.adapters.repositories.file_movie_repository import FileMovieRepository
from genre_recommendation.infrastructure.config.settings import RecommenderSettings
from genre_recommendation.infrastructure.logging.logger import setup_logging
from genre_recommendation.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def main() -> None:
    settings = RecommenderSettings()
    parser = argparse.ArgumentParser(description="Recommend movies that share genres with a liked movie")
    parser.add_argument("--catalog", type=str, default=settings.catalog_path)
    parser.add_argument("--movie_id", type=int, required=True)
    parser.add_argument("--top_k", type=int, default=settings.default_top_k)
    parser.add_argument("--show_scores", action="store_true")
    args = parser.parse_args()

    setup_logging()
    try:
        repository = FileMovieRepository(args.catalog)
        service = RecommendationApplicationService(settings, repository, StdLoggerAdapter("recommend"))
        result = asyncio.run(service.recommend(movie_id=args.movie_id, top_k=args.top_k))
    except DomainError as e:
        print(RecommendationPresenter.format_error(e), file=sys.stderr)
        print(f"  ({e})", file=sys.stderr)
        sys.exit(1)

    message, _ = RecommendationPresenter.format_message(result)
    print(message)
    if args.show_scores:
        for rank, rec in enumerate(result.recommendations, 1):
            print(f"  {rank}. {rec.title}  [{rec.similarity_score:.1%} match]  {', '.join(rec.genres)}")


if __name__ == "__main__":
    main()

from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from genre_recommendation.applications.interfaces.dtos.recommendation import (
    RecommendationHealthResponse,
    RecommendationResultResponse,
)
from genre_recommendation.applications.services.recommendation_presenter import RecommendationPresenter
from genre_recommendation.domain.exceptions import EmptyCatalogError, InvalidInputError, NotFoundError
from genre_recommendation.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from genre_recommendation.infrastructure.config.dependencies import get_recommendation_service
from genre_recommendation.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

RecommendationServiceDep = Annotated[RecommendationApplicationServicePort, Depends(get_recommendation_service)]


@router.get("/health", response_model=RecommendationHealthResponse)
async def recommendation_health_check(recommendation_service: RecommendationServiceDep):
    """Health check endpoint for recommendation service"""
    catalog_size = await recommendation_service.catalog_size()
    return RecommendationHealthResponse(
        status="healthy",
        service="genre-recommendation-engine",
        catalog_size=catalog_size,
        message=f"Data loaded. {catalog_size} movies available.",
    )


@router.get("/{movie_id}", response_model=RecommendationResultResponse)
async def get_recommendations(
    movie_id: int,
    recommendation_service: RecommendationServiceDep,
    top_k: Optional[int] = Query(None, ge=1, le=100),
):
    """Recommend movies sharing genres with the given movie"""
    try:
        result = await recommendation_service.recommend(movie_id=movie_id, top_k=top_k)
        return RecommendationPresenter.to_response(result)

    except NotFoundError as e:
        logger.warning(f"Recommendations requested for unknown movie: {e}")
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=RecommendationPresenter.format_error(e))
    except EmptyCatalogError as e:
        logger.warning(f"Catalog too small for recommendations: {e}")
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=RecommendationPresenter.format_error(e))
    except InvalidInputError as e:
        logger.warning(f"Bad request in recommendations: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=RecommendationPresenter.format_error(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled error calculating recommendations")
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=RecommendationPresenter.format_error(e)
        )

"""
Load recommendation endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_load_service
from app.schemas.load import WeightRecommendation, WeightRecommendationRequest
from app.services.load_service import LoadService

router = APIRouter()


@router.post("/recommendation", summary="Recommend the load for the next sets of an exercise.",
             response_model=WeightRecommendation, )
def recommend_weight(user_id: str, data: WeightRecommendationRequest,
                     service: LoadService = Depends(get_load_service), ):
    recommendation = service.recommend_weight(user_id, data)
    if recommendation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail=f"No history for exercise '{data.exercise_id}'", )
    return recommendation

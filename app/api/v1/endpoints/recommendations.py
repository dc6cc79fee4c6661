"""
Recommendation endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_recommendation_service
from app.schemas.recommendation import (
    NextWorkoutRecommendation,
    PersonalizedRecommendationRecord,
    WorkoutDayPlan,
)
from app.services.recommendation_service import RecommendationService

router = APIRouter()


@router.get("", summary="List recent recommendations.", response_model=list[PersonalizedRecommendationRecord])
def list_recommendations(user_id: str, limit: int = Query(50, ge=1, le=200),
                         service: RecommendationService = Depends(get_recommendation_service), ):
    return service.list_recent(user_id, limit=limit)


@router.post("/generate", summary="Generate personalized recommendations.",
             response_model=list[PersonalizedRecommendationRecord], status_code=status.HTTP_201_CREATED, )
def generate_recommendations(user_id: str,
                             service: RecommendationService = Depends(get_recommendation_service), ):
    return service.generate(user_id)


@router.post("/next-workout", summary="Adjust a planned day to the current fatigue.",
             response_model=NextWorkoutRecommendation, )
def next_workout(user_id: str, day: WorkoutDayPlan,
                 service: RecommendationService = Depends(get_recommendation_service), ):
    return service.next_workout(user_id, day)

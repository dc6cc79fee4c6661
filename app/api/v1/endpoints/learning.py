"""
Learning profile and training preference endpoints.
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_learning_service, get_preferences_service
from app.schemas.learning import (
    ExercisePreferenceUpdate,
    LearningProfileState,
    TrainingPreferencesState,
)
from app.services.learning_service import LearningService, PreferencesService

router = APIRouter()


@router.get("/profile", summary="Get the learning profile.", response_model=LearningProfileState)
def get_profile(user_id: str, service: LearningService = Depends(get_learning_service)):
    return service.get_profile(user_id)


@router.post("/profile/update", summary="Recompute the learning profile from history.",
             response_model=LearningProfileState, )
def update_profile(user_id: str, service: LearningService = Depends(get_learning_service)):
    return service.update_profile(user_id)


@router.put("/profile/exercise-preferences", summary="Replace preferred and avoided exercises.",
            response_model=LearningProfileState, )
def set_exercise_preferences(user_id: str, data: ExercisePreferenceUpdate,
                             service: LearningService = Depends(get_learning_service), ):
    return service.set_exercise_preferences(user_id, data)


@router.get("/preferences", summary="Get training preferences.", response_model=TrainingPreferencesState)
def get_preferences(user_id: str, service: PreferencesService = Depends(get_preferences_service)):
    return service.get_preferences(user_id)


@router.post("/preferences/learn", summary="Learn training preferences from workout patterns.",
             response_model=TrainingPreferencesState,
             responses={status.HTTP_204_NO_CONTENT: {"description": "Not enough workout history"}}, )
def learn_preferences(user_id: str, service: PreferencesService = Depends(get_preferences_service)):
    preferences = service.learn(user_id)
    if preferences is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return preferences

"""
Exercise response endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_exercise_response_service
from app.schemas.exercise_response import ExerciseResponseCreate, ExerciseResponseState
from app.services.exercise_response_service import ExerciseResponseService

router = APIRouter()


@router.get("/{exercise_id}", summary="Get the response profile for an exercise.",
            response_model=ExerciseResponseState, )
def get_response(user_id: str, exercise_id: str,
                 service: ExerciseResponseService = Depends(get_exercise_response_service), ):
    profile = service.get(user_id, exercise_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise response not found")
    return profile


@router.post("/{exercise_id}", summary="Record how an exercise felt.", response_model=ExerciseResponseState)
def record_response(user_id: str, exercise_id: str, data: ExerciseResponseCreate,
                    service: ExerciseResponseService = Depends(get_exercise_response_service), ):
    return service.record(user_id, exercise_id, data)

"""
Fatigue endpoints.

Read and update a user's fatigue state, check for a due deload and
break fatigue down by muscle group.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_fatigue_service
from app.schemas.fatigue import (
    DeloadCheckResponse,
    MuscleGroupFatigueResponse,
    UserFatigueState,
    WorkoutFatigueRequest,
)
from app.services.fatigue_service import FatigueService

router = APIRouter()


@router.get("", summary="Get the current fatigue state.", response_model=UserFatigueState)
def get_fatigue(user_id: str, service: FatigueService = Depends(get_fatigue_service)):
    return service.get_fatigue(user_id)


@router.post("/workout", summary="Apply a completed workout.", response_model=UserFatigueState)
def apply_workout(user_id: str, data: WorkoutFatigueRequest,
                  service: FatigueService = Depends(get_fatigue_service), ):
    return service.apply_workout(user_id, data.intensity)


@router.post("/rest", summary="Apply a rest day.", response_model=UserFatigueState)
def apply_rest(user_id: str, service: FatigueService = Depends(get_fatigue_service)):
    return service.apply_rest(user_id)


@router.get("/deload", summary="Check whether a deload week is due.", response_model=DeloadCheckResponse)
def check_deload(user_id: str, service: FatigueService = Depends(get_fatigue_service)):
    return service.check_deload(user_id)


@router.get("/muscle-groups", summary="Fatigue per muscle group over the last 7 days.",
            response_model=MuscleGroupFatigueResponse, )
def muscle_group_fatigue(user_id: str, service: FatigueService = Depends(get_fatigue_service)):
    return service.muscle_group_fatigue(user_id)

"""
Workout, exercise history and wellness log endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_workout_service
from app.schemas.wellness import (
    MealLogCreate,
    MealLogResponse,
    NutritionLogCreate,
    NutritionLogResponse,
    SleepLogCreate,
    SleepLogResponse,
)
from app.schemas.workout import (
    ExerciseHistoryCreate,
    ExerciseHistoryResponse,
    WorkoutLogCreate,
    WorkoutLogResponse,
)
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.post("/workouts", summary="Log a workout.", response_model=WorkoutLogResponse,
             status_code=status.HTTP_201_CREATED, )
def log_workout(user_id: str, data: WorkoutLogCreate, service: WorkoutService = Depends(get_workout_service)):
    return service.log_workout(user_id, data)


@router.get("/workouts", summary="List workouts, oldest first.", response_model=list[WorkoutLogResponse])
def list_workouts(user_id: str,
                  since: Optional[datetime.datetime] = Query(None, description="Only workouts from this date on"),
                  service: WorkoutService = Depends(get_workout_service), ):
    return service.list_workouts(user_id, since=since)


@router.post("/exercise-history", summary="Record the load used on an exercise.",
             response_model=ExerciseHistoryResponse, status_code=status.HTTP_201_CREATED, )
def record_history(user_id: str, data: ExerciseHistoryCreate,
                   service: WorkoutService = Depends(get_workout_service), ):
    return service.record_history(user_id, data)


@router.get("/exercise-history/{exercise_id}", summary="Latest loads for an exercise, newest first.",
            response_model=list[ExerciseHistoryResponse], )
def exercise_history(user_id: str, exercise_id: str, limit: int = Query(10, ge=1, le=100),
                     service: WorkoutService = Depends(get_workout_service), ):
    return service.exercise_history(user_id, exercise_id, limit=limit)


@router.post("/sleep", summary="Log sleep quality.", response_model=SleepLogResponse,
             status_code=status.HTTP_201_CREATED, )
def log_sleep(user_id: str, data: SleepLogCreate, service: WorkoutService = Depends(get_workout_service)):
    return service.log_sleep(user_id, data)


@router.post("/nutrition", summary="Log nutrition adherence.", response_model=NutritionLogResponse,
             status_code=status.HTTP_201_CREATED, )
def log_nutrition(user_id: str, data: NutritionLogCreate,
                  service: WorkoutService = Depends(get_workout_service), ):
    return service.log_nutrition(user_id, data)


@router.post("/meals", summary="Log a meal.", response_model=MealLogResponse, status_code=status.HTTP_201_CREATED)
def log_meal(user_id: str, data: MealLogCreate, service: WorkoutService = Depends(get_workout_service)):
    return service.log_meal(user_id, data)


@router.get("/meals", summary="List meals, oldest first.", response_model=list[MealLogResponse])
def list_meals(user_id: str, service: WorkoutService = Depends(get_workout_service)):
    return service.list_meals(user_id)

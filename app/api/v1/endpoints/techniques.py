"""
Training technique endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from app.adaptive import techniques
from app.schemas.technique import ExerciseSuitability, TechniqueCategory, TechniqueDetails
from app.schemas.training import ExerciseType, MuscleGroup, TrainingGoal, TrainingLevel

router = APIRouter()


@router.get("", summary="Techniques for a goal and training level.", response_model=list[TechniqueDetails])
def recommended_techniques(goal: TrainingGoal, level: TrainingLevel):
    return techniques.recommended_techniques(goal, level)


@router.get("/category/{category}", summary="Techniques in a category.", response_model=list[TechniqueDetails])
def techniques_by_category(category: TechniqueCategory):
    return techniques.techniques_by_category(category)


@router.get("/suitability/{suitability}", summary="Techniques for an equipment or movement family.",
            response_model=list[TechniqueDetails], )
def techniques_for_suitability(suitability: ExerciseSuitability):
    return techniques.techniques_for_suitability(suitability)


@router.get("/muscle-group/{muscle_group}", summary="Techniques for a muscle group.",
            response_model=list[TechniqueDetails], )
def techniques_for_muscle_group(muscle_group: MuscleGroup):
    return techniques.techniques_for_muscle_group(muscle_group)


@router.get("/for-exercise", summary="Techniques applicable to an exercise role and goal.",
            response_model=list[TechniqueDetails], )
def techniques_for_exercise(exercise_type: ExerciseType, goal: TrainingGoal,
                            muscle_group: Optional[MuscleGroup] = None, ):
    return techniques.techniques_for_exercise(exercise_type, goal, muscle_group)


@router.get("/{technique_id}", summary="A technique by id.", response_model=TechniqueDetails)
def get_technique(technique_id: str):
    technique = techniques.get_technique(technique_id)
    if technique is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown technique: '{technique_id}'")
    return technique


@router.get("/{technique_id}/applicable", summary="Whether a technique suits an exercise role and goal.")
def is_applicable(technique_id: str, exercise_type: ExerciseType, goal: TrainingGoal):
    if techniques.get_technique(technique_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown technique: '{technique_id}'")
    return {
        "technique_id": technique_id,
        "exercise_type": exercise_type,
        "goal": goal,
        "applicable": techniques.is_technique_applicable(technique_id, exercise_type, goal),
    }

"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (exercise_response, fatigue, learning, load, logs, periodization, recommendations,
                                  techniques, )

api_router = APIRouter()

_USER = "/users/{user_id}"

# Per-user endpoints
api_router.include_router(
    fatigue.router, prefix=f"{_USER}/fatigue", tags=["Fatigue"]
)
api_router.include_router(
    load.router, prefix=f"{_USER}/load", tags=["Load"]
)
api_router.include_router(
    learning.router, prefix=f"{_USER}/learning", tags=["Learning"]
)
api_router.include_router(
    exercise_response.router,
    prefix=f"{_USER}/exercise-responses",
    tags=["Exercise responses"],
)
api_router.include_router(
    recommendations.router,
    prefix=f"{_USER}/recommendations",
    tags=["Recommendations"],
)
api_router.include_router(
    logs.router, prefix=f"{_USER}/logs", tags=["Logs"]
)

# Static catalogs
api_router.include_router(
    periodization.router, prefix="/periodization", tags=["Periodization"]
)
api_router.include_router(
    techniques.router, prefix="/techniques", tags=["Techniques"]
)

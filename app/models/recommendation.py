"""
Personalized recommendation database model.

Rows are generated from a snapshot of the learning profile, fatigue and
preferences and never mutated afterwards.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class PersonalizedRecommendation(SQLModel, table=True):
    """Immutable advisory record."""
    __tablename__ = "personalized_recommendations"

    id: str = Field(primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=64)

    type: str = Field(nullable=False, max_length=16)
    title: str = Field(nullable=False, max_length=255)
    description: str = Field(nullable=False)
    priority: str = Field(nullable=False, max_length=8)
    base_reason: str = Field(nullable=False, max_length=255)

    data_points: dict = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )

    created: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    expires: Optional[datetime.datetime] = Field(default=None)
    implemented: bool = Field(default=False, nullable=False)
    result: Optional[str] = Field(default=None)

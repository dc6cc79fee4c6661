"""
Boundary validation shared by the typed repositories.

Rows coming out of the store are validated into pydantic schemas here; a
row that does not satisfy its schema becomes an ``INVALID_ROW`` error
instead of leaking into the computation layer.
"""

import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.db.store import StoreErrorKind, StoreResult

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def to_schema(result: StoreResult, schema: Type[SchemaT]) -> StoreResult[SchemaT]:
    """Validate a single-row result into ``schema``."""
    if not result.ok:
        return StoreResult.failure(result.error, result.message)
    try:
        return StoreResult.success(schema.model_validate(result.data))
    except ValidationError as exc:
        logger.error("Invalid %s row: %s", schema.__name__, exc)
        return StoreResult.failure(StoreErrorKind.INVALID_ROW, str(exc))


def to_schema_list(result: StoreResult, schema: Type[SchemaT]) -> StoreResult[list[SchemaT]]:
    """Validate a multi-row result into a list of ``schema``."""
    if not result.ok:
        return StoreResult.failure(result.error, result.message)
    try:
        return StoreResult.success([schema.model_validate(row) for row in result.data])
    except ValidationError as exc:
        logger.error("Invalid %s row: %s", schema.__name__, exc)
        return StoreResult.failure(StoreErrorKind.INVALID_ROW, str(exc))

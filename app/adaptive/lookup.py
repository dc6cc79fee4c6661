"""
Lookup-with-default for the static tables.

Several tables answer "the entry for (level, goal)" and quietly fall back
to a default when nothing matches.  :func:`lookup_with_default` makes the
substitution visible: callers get a
:class:`~app.schemas.periodization.LookupResult` tagged ``exact`` or
``fallback``.
"""

import logging
from typing import Callable, Iterable, TypeVar

from app.schemas.periodization import LookupResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def lookup_with_default(
    items: Iterable[T],
    predicate: Callable[[T], bool],
    default: T,
    what: str = "entry",
) -> LookupResult[T]:
    """Return the first item matching ``predicate``, else ``default``."""
    for item in items:
        if predicate(item):
            return LookupResult(value=item, source="exact")
    logger.debug("No exact %s match, using fallback", what)
    return LookupResult(value=default, source="fallback")

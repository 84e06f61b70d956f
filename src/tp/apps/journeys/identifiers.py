"""
Parent-scoped identifier allocation and lookup.

Ids are unique only among siblings sharing the same parent (journeys are
the exception: their siblings are the whole load-set).  Allocation
always scans the sibling ids rather than keeping a counter, so an id
freed by a removed sibling is the first to be handed out again.
"""
import logging
from typing import Iterable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def next_free_id( existing_ids : Iterable[int] ) -> int:
    """
    Smallest positive integer not present in existing_ids.
    """
    used_ids = set( existing_ids )
    candidate_id = 1
    while candidate_id in used_ids:
        candidate_id += 1
    logger.debug( f'Allocated id {candidate_id} (siblings: {sorted(used_ids)})' )
    return candidate_id


def find_by_id( items : Sequence[T], item_id : Optional[int] ) -> Optional[T]:
    """
    Sibling with the given id, or None when no sibling carries it.
    """
    if item_id is None:
        return None
    for item in items:
        if item.id == item_id:
            return item
        continue
    return None

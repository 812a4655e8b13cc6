"""
FruitFall - Collision scans.

Collisions are resolved mark-then-filter: a full pairwise pass flags
every overlapping pair, and consumed entities are only removed by a
later compaction. A knife that overlaps two hazards therefore scores
against both in the same pass.
"""
from typing import List, Sequence, Tuple, TypeVar

from games.FruitFall.entities import Hazard, Knife

T = TypeVar('T', Knife, Hazard)


def find_hits(knives: Sequence[Knife], hazards: Sequence[Hazard]) -> List[Tuple[Knife, Hazard]]:
    """Mark every overlapping knife/hazard pair as consumed.

    Entities already consumed earlier in the tick are still tested,
    matching the pairwise pass over the unfiltered lists.

    Returns:
        Overlapping pairs in scan order (knife-major)
    """
    hits = []
    for knife in knives:
        for hazard in hazards:
            if knife.overlaps(hazard):
                knife.mark_consumed()
                hazard.mark_consumed()
                hits.append((knife, hazard))
    return hits


def find_floor_hits(bombs: Sequence[Hazard]) -> List[Hazard]:
    """Mark bombs whose bottom edge has reached the floor.

    Returns:
        Bombs that landed this pass
    """
    landed = []
    for bomb in bombs:
        if not bomb.consumed and bomb.touches_floor():
            bomb.mark_consumed()
            landed.append(bomb)
    return landed


def compact(entities: Sequence[T]) -> List[T]:
    """Drop consumed and out-of-bounds entities, keeping order."""
    return [e for e in entities if not e.consumed and not e.is_out_of_bounds()]

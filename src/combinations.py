import random
from typing import List, NamedTuple, Optional

from src.relation_index import RelationIndex
from src.selection import SelectionState


class Combination(NamedTuple):
    """A video paired with one of its galleries"""
    video_name: str
    gallery_name: str


def generate_combinations(index: RelationIndex,
                          selection: SelectionState,
                          rng: Optional[random.Random] = None) -> List[Combination]:
    """
    Every (video, gallery) pairing allowed by the selection, in random order.

    A selected video qualifies when it is indexed and, if any tags are
    selected, carries all of them. A video with no tags therefore never
    passes an active tag filter. Each of its related galleries that is also
    selected yields one pairing. Membership is deterministic; only the
    order comes from rng.
    """
    selected_galleries = selection.galleries
    selected_tags = selection.tags

    combinations: List[Combination] = []
    for video_name in sorted(selection.videos):
        if video_name not in index:
            continue

        if selected_tags and not selected_tags.issubset(index.tags_for(video_name)):
            continue

        for gallery_name in index.galleries_for(video_name):
            if gallery_name in selected_galleries:
                combinations.append(Combination(video_name, gallery_name))

    (rng or random).shuffle(combinations)
    return combinations

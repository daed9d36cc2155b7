"""
Video -> gallery and video -> tag adjacency built from discovery results
and the relation table of the configuration document.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence

from src.config import VideoRelation


@dataclass
class RelationIndex:
    video_galleries: Dict[str, List[str]] = field(default_factory=dict)
    video_tags: Dict[str, List[str]] = field(default_factory=dict)

    def __contains__(self, video_name: str) -> bool:
        return video_name in self.video_galleries

    def galleries_for(self, video_name: str) -> List[str]:
        return self.video_galleries.get(video_name, [])

    def tags_for(self, video_name: str) -> List[str]:
        return self.video_tags.get(video_name, [])


def build_index(video_names: Sequence[str],
                gallery_names: Sequence[str],
                tag_names: Sequence[str],
                relation_table: Mapping[str, VideoRelation]) -> RelationIndex:
    """
    Relate every discovered video to its galleries and tags.

    A video without a relation entry is unconstrained: it pairs with every
    gallery and carries no tags. Names in an entry that were not discovered
    (galleries) or not declared (tags) are dropped; the entry's order is kept.
    """
    known_galleries = set(gallery_names)
    known_tags = set(tag_names)

    index = RelationIndex()
    for video_name in video_names:
        relation = relation_table.get(video_name)
        if relation is None:
            index.video_galleries[video_name] = list(gallery_names)
            index.video_tags[video_name] = []
            continue

        index.video_galleries[video_name] = [g for g in relation.galleries if g in known_galleries]
        index.video_tags[video_name] = [t for t in relation.tags if t in known_tags]

    return index

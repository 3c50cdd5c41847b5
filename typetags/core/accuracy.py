"""
Self-check of the type-tag table.

Every category should report its own tag. When two categories collide the
library stays usable; the collision is recorded and a warning is logged so
callers know which predicates cannot tell those categories apart.
"""

from dataclasses import dataclass
from typing import Mapping, Tuple

from typetags.config.settings import get_typetag_settings
from typetags.core.tags import TYPE_TAGS
from typetags.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccuracyReport:
    """
    Outcome of comparing every pair of entries in a tag table.

    Attributes:
        accuracy: Share of keys whose tag collides with no other key
        questionable: Colliding ``(key_a, key_b)`` pairs in table order
        total: Number of keys checked
        unique: Number of keys without a collision
    """

    accuracy: float
    questionable: Tuple[Tuple[str, str], ...]
    total: int
    unique: int

    @property
    def is_exact(self) -> bool:
        return self.accuracy == 1.0


def check_accuracy(tags: Mapping[str, str], warn: bool = True) -> AccuracyReport:
    """
    Compare the tags of every pair of distinct keys.

    Args:
        tags: Mapping of type-name key to canonical tag
        warn: Log a warning when any pair collides

    Returns:
        AccuracyReport for the table
    """
    keys = list(tags)
    questionable = []
    colliding = set()

    for position, key in enumerate(keys):
        for other in keys[position + 1 :]:
            if tags[key] == tags[other]:
                questionable.append((key, other))
                colliding.update((key, other))

    total = len(keys)
    unique = total - len(colliding)
    report = AccuracyReport(
        accuracy=unique / total if total else 1.0,
        questionable=tuple(questionable),
        total=total,
        unique=unique,
    )

    if warn and not report.is_exact:
        logger.warning(
            f"Type tag table reported non-unique value pairs "
            f"(accuracy {report.accuracy:.2f}): {list(report.questionable)}"
        )
    return report


TYPE_TAGS_REPORT = check_accuracy(
    TYPE_TAGS, warn=get_typetag_settings().warn_on_collisions
)
TYPE_TAGS_ACCURACY = TYPE_TAGS_REPORT.accuracy
TYPE_TAGS_QUESTIONABLE = TYPE_TAGS_REPORT.questionable

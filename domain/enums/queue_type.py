"""Queue kind enumeration."""
from enum import Enum


class QueueKind(Enum):
    """Matchmaking queue categories shown in the match history.

    Derived from the numeric ``info.queueId`` of a match document; codes not
    in the table fall back to OTHER.
    """

    RANKED_SOLO = "ranked-solo"
    RANKED_FLEX = "ranked-flex"
    NORMAL = "normal"
    ARAM = "aram"
    OTHER = "other"

    @classmethod
    def from_queue_id(cls, queue_id: int) -> 'QueueKind':
        return _QUEUE_KINDS.get(queue_id, cls.OTHER)

    @property
    def label(self) -> str:
        names = {
            "ranked-solo": "Ranked solo/duo",
            "ranked-flex": "Ranked flex",
            "normal": "Normal",
            "aram": "Aram",
            "other": "Other",
        }
        return names[self.value]

    @property
    def has_vision_score(self) -> bool:
        """ARAM has no wards worth scoring; its vision score is not shown."""
        return self is not QueueKind.ARAM


_QUEUE_KINDS = {
    420: QueueKind.RANKED_SOLO,
    440: QueueKind.RANKED_FLEX,
    400: QueueKind.NORMAL,   # Draft
    430: QueueKind.NORMAL,   # Blind
    490: QueueKind.NORMAL,   # Quickplay
    450: QueueKind.ARAM,
}

_QUEUE_LABELS = {
    420: "Ranked Solo/Duo",
    440: "Ranked Flex",
    450: "ARAM",
    400: "Normal Draft",
    430: "Normal Blind",
    490: "Quickplay",
    700: "Clash",
    830: "Co-op vs AI Intro",
    840: "Co-op vs AI Beginner",
    850: "Co-op vs AI Intermediate",
}


def queue_label(queue_id: int) -> str:
    """Descriptive queue name used on the full-match screen."""
    return _QUEUE_LABELS.get(queue_id, "Unknown Game Mode")

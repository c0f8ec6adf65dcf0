from enum import Enum


class SpecStatus(Enum):
    IN_PROGRESS = ("IN_PROGRESS", "warn", "●")
    PENDING = ("PENDING", "pending", "○")
    COMPLETED = ("COMPLETED", "ok", "✓")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def glyph(self) -> str:
        return self.value[2]

    @property
    def rank(self) -> int:
        return _RANK[self]

    def __lt__(self, other: "SpecStatus") -> bool:
        if not isinstance(other, SpecStatus):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def derive(cls, checked: int, total: int) -> "SpecStatus":
        """Status is a pure function of the counts; nothing else feeds into it."""
        if total > 0 and checked == total:
            return cls.COMPLETED
        if 0 < checked < total:
            return cls.IN_PROGRESS
        return cls.PENDING


_RANK = {
    SpecStatus.IN_PROGRESS: 0,
    SpecStatus.PENDING: 1,
    SpecStatus.COMPLETED: 2,
}

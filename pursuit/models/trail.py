from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .locations import UNKNOWN, Location, is_double_back, is_hide

TRAIL_SIZE = 6


class Trail(BaseModel):
    """Fixed-length location history, most recent first.

    Pushing a new entry drops the oldest one. The first ``len - 1`` entries
    form the window that stays on the trail after the next move.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[Location, ...] = Field(min_length=2)

    @classmethod
    def empty(cls, size: int = TRAIL_SIZE) -> Trail:
        return cls(entries=(UNKNOWN,) * size)

    def __len__(self) -> int:
        return len(self.entries)

    def push(self, loc: Location) -> Trail:
        return Trail(entries=(loc,) + self.entries[:-1])

    @property
    def most_recent(self) -> Location:
        return self.entries[0]

    @property
    def oldest(self) -> Location:
        return self.entries[-1]

    def at(self, age: int) -> Location:
        """Entry ``age`` moves back; 0 is the latest."""
        if not 0 <= age < len(self.entries):
            raise IndexError(f"trail age {age} out of range 0..{len(self.entries) - 1}")
        return self.entries[age]

    def window(self) -> tuple[Location, ...]:
        return self.entries[:-1]

    def has_hide(self) -> bool:
        return any(is_hide(loc) for loc in self.window())

    def has_double_back(self) -> bool:
        return any(is_double_back(loc) for loc in self.window())

    def age_of(self, loc: Location) -> int | None:
        """Most recent age of ``loc`` inside the window, or None."""
        for age, entry in enumerate(self.window()):
            if entry == loc:
                return age
        return None

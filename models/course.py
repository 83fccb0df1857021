from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# Identity is the course number only. Two records with the same number compare
# equal (and sort together) even if title or prerequisites differ.
@dataclass(frozen=True, order=True)
class Course:
    number: str
    title: str = field(default="", compare=False)

    # course numbers, kept as written in the source (not resolved)
    prerequisites: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        # accept any iterable of course numbers (list, tuple, generator) but store a tuple
        if isinstance(self.prerequisites, str):
            raise TypeError(
                f"prerequisites must be a sequence of course numbers, not a str: {self.prerequisites!r}"
            )
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, "prerequisites", tuple(self.prerequisites))

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "title": self.title,
            "prerequisites": list(self.prerequisites),
        }

    def __repr__(self) -> str:
        return f"<Course {self.number}>"

"""Task domain model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Task:
    """A single task with an identifier, a title and a completion flag."""

    id: str = ""
    title: str = ""
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Task:
        """Build a task from a mapping; unknown keys are ignored, missing ones default."""
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            done=bool(data.get("done", False)),
        )
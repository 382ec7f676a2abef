"""DTOs for curriculum levels."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LevelResult:
    """Level read-model. order is a positive int, unique across levels."""

    id: str
    name: str
    order: int

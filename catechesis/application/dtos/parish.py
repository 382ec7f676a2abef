"""DTOs for parish (tenant) reads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParishResult:
    """Parish read-model."""

    id: str
    name: str

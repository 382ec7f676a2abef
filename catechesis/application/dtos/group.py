"""DTOs for teaching groups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupResult:
    """Group read-model: one cohort within a parish, level and period."""

    id: str
    tenant_id: str
    level_id: str
    name: str
    period: str

"""DTOs for catechumens and the records eligibility reads about them."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PersonResult:
    """Catechumen read-model. special_case bypasses the age floor."""

    id: str
    first_names: str
    last_names: str
    birth_date: date
    document_id: str
    special_case: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.last_names}"

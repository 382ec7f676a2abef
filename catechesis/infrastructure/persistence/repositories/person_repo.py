"""Person repository plus the certificate reads used by eligibility."""

from sqlalchemy import distinct, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.person import PersonResult
from catechesis.infrastructure.persistence.models.level import Level
from catechesis.infrastructure.persistence.models.person import (
    BaptismRecord,
    Certificate,
    LegalRepresentative,
    Person,
)
from catechesis.infrastructure.persistence.repositories.base import BaseRepository


def _person_to_result(p: Person) -> PersonResult:
    return PersonResult(
        id=p.id,
        first_names=p.first_names,
        last_names=p.last_names,
        birth_date=p.birth_date,
        document_id=p.document_id,
        special_case=p.special_case,
    )


class PersonRepository(BaseRepository[Person]):
    """Catechumen lookups and presence/count reads of attached records."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Person)

    async def get_by_id(self, person_id: str) -> PersonResult | None:
        person = await self._get(person_id)
        return _person_to_result(person) if person else None

    async def has_baptism_record(self, person_id: str) -> bool:
        result = await self.db.execute(
            select(exists().where(BaptismRecord.person_id == person_id))
        )
        return bool(result.scalar())

    async def count_legal_representatives(self, person_id: str) -> int:
        result = await self.db.execute(
            select(func.count(LegalRepresentative.id)).where(
                LegalRepresentative.person_id == person_id
            )
        )
        return int(result.scalar() or 0)


class CertificateRepository(BaseRepository[Certificate]):
    """Read-only access to certificates."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Certificate)

    async def get_approved_level_orders(self, person_id: str) -> frozenset[int]:
        result = await self.db.execute(
            select(distinct(Level.order))
            .join(Certificate, Certificate.level_id == Level.id)
            .where(Certificate.person_id == person_id, Certificate.approved.is_(True))
        )
        return frozenset(int(o) for o in result.scalars().all())

# app/crud/crud_profile.py
import uuid
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.profile import Profile

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escapa os curingas do LIKE para que % e _ sejam buscados literalmente."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class CRUDProfile:
    async def get(self, db: AsyncSession, id: uuid.UUID) -> Optional[Profile]:
        return await db.get(Profile, id)

    async def search(self, db: AsyncSession, *, query: str, digits: str = "", limit: int = 5) -> List[Profile]:
        """Busca parcial, sem diferenciar maiúsculas, em nome, e-mail, CPF e telefone."""
        pattern = f"%{escape_like(query)}%"
        conditions = [
            Profile.full_name.ilike(pattern, escape=LIKE_ESCAPE),
            Profile.email.ilike(pattern, escape=LIKE_ESCAPE),
            Profile.cpf.ilike(pattern, escape=LIKE_ESCAPE),
            Profile.phone.ilike(pattern, escape=LIKE_ESCAPE),
        ]
        if digits:
            conditions += [Profile.cpf.ilike(f"%{digits}%"), Profile.phone.ilike(f"%{digits}%")]
        result = await db.execute(select(Profile).where(or_(*conditions)).order_by(Profile.full_name).limit(limit))
        return list(result.scalars().all())


profile = CRUDProfile()

# app/services/customer_service.py
import logging
from typing import List, Set

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UpstreamError
from app.crud import address as crud_address
from app.crud import profile as crud_profile
from app.schemas.address import AddressSchemas
from app.schemas.customer import CustomerSearchResultSchemas
from app.services.asaas_service import SEARCH_LIMIT, AsaasClient
from app.utils import only_digits

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
LOCAL_LIMIT = 5
REMOTE_ID_PREFIX = "asaas_"


def _address_or_none(address):
    return AddressSchemas.model_validate(address) if address is not None else None


class CustomerResolver:
    """
    Junta clientes locais (profiles) com os do Asaas.
    Clientes do Asaas com o mesmo CPF de um cliente local são descartados.
    Cada resultado leva o endereço padrão cadastrado localmente, quando houver.
    """

    def __init__(self, db: AsyncSession, asaas: AsaasClient):
        self.db = db
        self.asaas = asaas

    async def search(self, query: str) -> List[CustomerSearchResultSchemas]:
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        results: List[CustomerSearchResultSchemas] = []
        cpfs_found: Set[str] = set()

        profiles = await crud_profile.search(self.db, query=query, digits=only_digits(query), limit=LOCAL_LIMIT)
        addresses = await crud_address.get_defaults_for_users(self.db, user_ids=[p.id for p in profiles])
        for p in profiles:
            results.append(CustomerSearchResultSchemas(
                id=str(p.id), full_name=p.full_name, phone=p.phone, cpf=p.cpf, email=p.email, source="LOCAL",
                address=_address_or_none(addresses.get(p.id)),
            ))
            if p.cpf:
                cpfs_found.add(only_digits(p.cpf))

        try:
            remote = await self.asaas.search_customers(query)
        except UpstreamError as e:
            logger.error("Erro ao buscar clientes no Asaas: %s", e.message)
            return results

        kept = []
        for c in remote[:SEARCH_LIMIT]:
            clean_cpf = only_digits(c.get("cpfCnpj"))
            if clean_cpf and clean_cpf in cpfs_found:
                continue
            kept.append(c)

        addresses = await crud_address.get_defaults_for_asaas(
            self.db, customer_ids=[c["id"] for c in kept if c.get("id")]
        )
        for c in kept:
            results.append(CustomerSearchResultSchemas(
                id=f"{REMOTE_ID_PREFIX}{c.get('id')}",
                full_name=c.get("name"),
                phone=c.get("mobilePhone") or c.get("phone"),
                cpf=c.get("cpfCnpj"),
                email=c.get("email"),
                source="ASAAS",
                address=_address_or_none(addresses.get(c.get("id"))),
            ))
        return results

"""
Cliente HTTP do Asaas (cobranças e clientes).

Consome apenas a API REST documentada do provedor:

    GET  /customers?cpfCnpj=...|name=...   busca de clientes
    POST /customers                        criação de cliente
    POST /payments                         criação de cobrança
    GET  /payments/{id}/pixQrCode          QR Code de cobranças PIX

Toda falha (rede, status HTTP de erro, chave ausente) vira UpstreamError,
com a descrição devolvida pelo Asaas quando existir.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import UpstreamError
from app.utils import only_digits

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10


def _error_description(response: httpx.Response) -> Optional[str]:
    try:
        errors = response.json().get("errors") or []
    except ValueError:
        return None
    if errors and isinstance(errors[0], dict):
        return errors[0].get("description")
    return None


class AsaasClient:
    def __init__(
        self,
        api_url: str = settings.ASAAS_API_URL,
        api_key: str = settings.ASAAS_API_KEY,
        timeout: float = settings.ASAAS_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self._http = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers={"access_token": api_key, "Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, default_error: str, **kwargs) -> Dict[str, Any]:
        if not self.api_key:
            raise UpstreamError("ASAAS_API_KEY não configurada")

        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Falha de comunicação com o Asaas (%s %s): %s", method, path, e)
            raise UpstreamError("Falha de comunicação com o Asaas") from e

        if response.is_error:
            description = _error_description(response)
            logger.error("Asaas respondeu %s em %s %s: %s", response.status_code, method, path, description)
            raise UpstreamError(description or default_error)

        return response.json()

    async def search_customers(self, query: str) -> List[Dict[str, Any]]:
        """Busca por CPF/CNPJ quando a consulta tem dígitos, senão por nome."""
        digits = only_digits(query)
        params = {"cpfCnpj": digits} if digits else {"name": query}
        params["limit"] = SEARCH_LIMIT
        data = await self._request("GET", "/customers", "Erro ao buscar clientes no Asaas", params=params)
        return data.get("data") or []

    async def find_customer_by_cpf(self, cpf_cnpj: str) -> Optional[Dict[str, Any]]:
        data = await self._request(
            "GET", "/customers", "Erro ao buscar cliente no Asaas", params={"cpfCnpj": only_digits(cpf_cnpj)}
        )
        customers = data.get("data") or []
        return customers[0] if customers else None

    async def get_or_create_customer(self, customer_in: Dict[str, Any]) -> Dict[str, Any]:
        """
        Evita clientes duplicados no Asaas: procura pelo CPF/CNPJ antes de criar.
        Se a busca prévia falhar, segue para a criação.
        """
        cpf_cnpj = customer_in["cpfCnpj"]
        try:
            existing = await self.find_customer_by_cpf(cpf_cnpj)
        except UpstreamError as e:
            logger.warning("Busca prévia de cliente %s falhou: %s", cpf_cnpj, e.message)
            existing = None
        if existing:
            logger.info("Cliente Asaas existente encontrado: %s", existing.get("id"))
            return existing

        logger.info("Criando cliente no Asaas para CPF/CNPJ %s", cpf_cnpj)
        return await self._request("POST", "/customers", "Erro ao criar cliente no Asaas", json=customer_in)

    async def create_charge(self, charge_in: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/payments", "Erro ao criar cobrança no Asaas", json=charge_in)

    async def get_pix_qr_code(self, payment_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/payments/{payment_id}/pixQrCode", "Erro ao obter QR Code PIX")


asaas_client = AsaasClient()

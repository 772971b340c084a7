# app/services/charge_service.py
import logging
from datetime import date
from typing import Any, Dict

from app.core.exceptions import UpstreamError, ValidationError
from app.schemas.charge import ChargeCreateSchemas
from app.schemas.customer import AsaasCustomerCreateSchemas
from app.services.asaas_service import AsaasClient
from app.utils import only_digits

logger = logging.getLogger(__name__)


class ChargeService:
    def __init__(self, asaas: AsaasClient):
        self.asaas = asaas

    async def create_customer(self, customer_in: AsaasCustomerCreateSchemas) -> Dict[str, Any]:
        if not customer_in.name or not only_digits(customer_in.cpf_cnpj):
            raise ValidationError("Nome e CPF/CNPJ são obrigatórios")

        payload = customer_in.model_dump(by_alias=True, exclude_none=True)
        payload["cpfCnpj"] = only_digits(customer_in.cpf_cnpj)
        if customer_in.mobile_phone:
            payload["mobilePhone"] = only_digits(customer_in.mobile_phone)
        return await self.asaas.get_or_create_customer(payload)

    async def create_charge(self, charge_in: ChargeCreateSchemas) -> Dict[str, Any]:
        customer_id = charge_in.customer
        if not customer_id and charge_in.name and charge_in.cpf_cnpj:
            customer = await self.create_customer(AsaasCustomerCreateSchemas(
                name=charge_in.name,
                cpf_cnpj=charge_in.cpf_cnpj,
                mobile_phone=charge_in.mobile_phone,
                email=charge_in.email,
            ))
            customer_id = customer.get("id")

        if not customer_id:
            raise ValidationError("Informe o ID do cliente ou os dados do cliente (nome e CPF/CNPJ)")

        payload = {
            "customer": customer_id,
            "billingType": charge_in.billing_type,
            "value": float(charge_in.value),
            "dueDate": (charge_in.due_date or date.today()).isoformat(),
            "description": charge_in.description,
            "externalReference": charge_in.external_reference,
        }
        charge = await self.asaas.create_charge({k: v for k, v in payload.items() if v is not None})
        result = dict(charge)

        if charge_in.billing_type == "PIX":
            try:
                result["pixQrCode"] = await self.asaas.get_pix_qr_code(charge["id"])
            except UpstreamError as e:
                # A cobrança já existe: devolve sem os dados do PIX
                logger.error("Erro ao obter QR Code PIX da cobrança %s: %s", charge.get("id"), e.message)

        return result

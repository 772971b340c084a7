from typing import Any, Dict

from fastapi import APIRouter, Depends

from app import schemas
from app.api.deps import get_charge_service
from app.core.logging import logger
from app.services.charge_service import ChargeService

router = APIRouter()


@router.post("")
async def create_charge(
    charge_in: schemas.ChargeCreate,
    service: ChargeService = Depends(get_charge_service),
) -> Dict[str, Any]:
    """
    Cria uma cobrança no Asaas. Para PIX, inclui o QR Code em pixQrCode
    quando disponível.
    """
    charge = await service.create_charge(charge_in)
    logger.info(f"Cobrança {charge.get('id')} criada ({charge_in.billing_type})")
    return charge

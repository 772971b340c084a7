# app/schemas/common.py
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Valores monetários: Decimal internamente, número no JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

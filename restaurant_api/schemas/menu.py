"""
Pho Huong Viet Order API — Menu schemas
"""
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, examples=[14])
    category: str
    name: str
    price: Money = Field(..., ge=0)
    description: str = ""


class MenuResponse(BaseModel):
    success: bool = True
    menu: dict[str, list[MenuItem]]
    items: list[MenuItem]

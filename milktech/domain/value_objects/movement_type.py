from __future__ import annotations

from enum import Enum


class MovementType(str, Enum):
    PURCHASE = "compra"
    SALE = "venda"
    DEATH = "obito"
    TRANSFER = "transferencia"

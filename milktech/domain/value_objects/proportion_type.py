from __future__ import annotations

from enum import Enum


class ProportionType(str, Enum):
    PERCENT = "percent"
    KG = "kg"

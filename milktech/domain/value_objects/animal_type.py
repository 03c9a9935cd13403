from __future__ import annotations

from enum import Enum


class AnimalType(str, Enum):
    COW = "vaca"
    BULL = "touro"
    MALE_CALF = "bezerro"
    FEMALE_CALF = "bezerra"
    STEER = "novilho"
    HEIFER = "novilha"

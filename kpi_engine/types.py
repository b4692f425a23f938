from dataclasses import dataclass
from enum import Enum
from typing import Union


class UndefinedReason(str, Enum):
    ZERO_TOTAL_ROOMS = "zero_total_rooms"
    ZERO_ROOMS_SOLD = "zero_rooms_sold"
    NEGATIVE_OPERAND = "negative_operand"


@dataclass(frozen=True)
class Defined:
    value: float


@dataclass(frozen=True)
class Undefined:
    reason: UndefinedReason


MetricResult = Union[Defined, Undefined]


@dataclass(frozen=True)
class KpiInputs:
    total_rooms: float = 0.0
    rooms_sold: float = 0.0
    total_revenue: float = 0.0


@dataclass(frozen=True)
class MetricDisplay:
    text: str
    hint: str = ""
    updated: bool = False


@dataclass(frozen=True)
class KpiDisplay:
    occupancy: MetricDisplay
    adr: MetricDisplay
    revpar: MetricDisplay

    def as_dict(self) -> dict:
        return {
            "occupancy": {"text": self.occupancy.text, "hint": self.occupancy.hint},
            "adr": {"text": self.adr.text, "hint": self.adr.hint},
            "revpar": {"text": self.revpar.text, "hint": self.revpar.hint},
        }

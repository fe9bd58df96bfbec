"""Battery chemistry."""

from __future__ import annotations

import enum
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Technology(enum.Enum):
    """Possible battery technologies."""

    UNKNOWN = "unknown"
    LITHIUM_ION = "lithium-ion"
    LEAD_ACID = "lead-acid"
    LITHIUM_POLYMER = "lithium-polymer"
    NICKEL_METAL_HYDRIDE = "nickel-metal-hydride"
    NICKEL_CADMIUM = "nickel-cadmium"
    NICKEL_ZINC = "nickel-zinc"
    LITHIUM_IRON_PHOSPHATE = "lithium-iron-phosphate"
    RECHARGEABLE_ALKALINE_MANGANESE = "rechargeable-alkaline-manganese"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Technology:
        """Map a driver's technology code to a member, ignoring ASCII case.

        Codes that are not recognised give ``UNKNOWN``.
        """
        return _ALIASES.get(text.translate(_ASCII_LOWER), cls.UNKNOWN)


_ALIASES = {
    "li-i": Technology.LITHIUM_ION,
    "li-ion": Technology.LITHIUM_ION,
    "lion": Technology.LITHIUM_ION,
    "pb": Technology.LEAD_ACID,
    "pbac": Technology.LEAD_ACID,
    "lip": Technology.LITHIUM_POLYMER,
    "lipo": Technology.LITHIUM_POLYMER,
    "li-poly": Technology.LITHIUM_POLYMER,
    "nimh": Technology.NICKEL_METAL_HYDRIDE,
    "nicd": Technology.NICKEL_CADMIUM,
    "nizn": Technology.NICKEL_ZINC,
    "life": Technology.LITHIUM_IRON_PHOSPHATE,
    "ram": Technology.RECHARGEABLE_ALKALINE_MANGANESE,
}
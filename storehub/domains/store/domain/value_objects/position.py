"""
Position Value Object

Latitude/longitude pair stored with each store.
"""

import math
from dataclasses import dataclass
from typing import Any

from storehub.core.domain import ValidationException, ValueObject


@dataclass(frozen=True)
class Position(ValueObject):
    """
    Geographic coordinates in decimal degrees.

    Only stored and returned; no distance or proximity queries are offered.
    """

    lat: float = 0.0
    lng: float = 0.0

    def _validate(self) -> None:
        """Check both coordinates are finite numbers in range."""
        if not _in_range(self.lat, 90):
            raise ValidationException(f"Latitude must be between -90 and 90, got {self.lat}", field="lat")
        if not _in_range(self.lng, 180):
            raise ValidationException(f"Longitude must be between -180 and 180, got {self.lng}", field="lng")

    def to_dict(self) -> dict[str, float]:
        return {"lat": float(self.lat), "lng": float(self.lng)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Position":
        try:
            return cls(lat=float(data["lat"]), lng=float(data["lng"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationException(f"Invalid location: {data!r}", field="location") from e


def _in_range(value: Any, bound: float) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and -bound <= value <= bound

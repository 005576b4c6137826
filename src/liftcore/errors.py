from __future__ import annotations


class InvalidFloorError(ValueError):
    """Raised in strict mode when a hall call names a floor outside the building."""

    def __init__(self, floor: int, num_floors: int) -> None:
        super().__init__(f"Floor {floor} is outside the building (valid: 0..{num_floors - 1})")
        self.floor = floor
        self.num_floors = num_floors

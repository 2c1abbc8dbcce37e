"""Pydantic models for serializing geometry values."""

from typing import Self

from pydantic import BaseModel, ConfigDict

from mite.domain.value_objects.point import Point


class PointModel(BaseModel):
    """Serialized form of a Point."""
    # inf and nan serialize as Infinity and NaN.
    model_config = ConfigDict(ser_json_inf_nan="constants")

    x: int | float
    y: int | float

    @classmethod
    def from_point(cls, point: Point) -> Self:
        """Create a model from a Point."""
        return cls(x=point.x, y=point.y)

    def to_point(self) -> Point:
        """Convert back to a Point, keeping coordinate types."""
        return Point(self.x, self.y)

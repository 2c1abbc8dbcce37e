"""Point value object for representing 2D coordinates."""

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from numbers import Real
from typing import Any, Generic, Self, TypeVar

T = TypeVar("T", bound=Real)
U = TypeVar("U", bound=Real)


def _multiply(value: Any, scalar: Any) -> Any:
    """Multiply a single coordinate by a scalar converted to its type."""
    return value * type(value)(scalar)


def _divide(value: Any, scalar: Any) -> Any:
    """Divide a single coordinate by a scalar converted to its type."""
    scalar = type(value)(scalar)
    if isinstance(value, int):
        # Integer quotient truncates toward zero; a zero divisor raises.
        quotient = abs(value) // abs(scalar)
        return quotient if (value < 0) == (scalar < 0) else -quotient
    if scalar == 0:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, scalar)
    return value / scalar


@dataclass
class Point(Generic[T]):
    """Mutable point in 2D space over a numeric element type.

    Mutators and compound assignment change the point in place and
    return it, so calls can be chained. Scalar arithmetic and
    ``cast`` return new points.
    """

    x: T = 0
    y: T = 0

    def at_x(self, value: T) -> Self:
        """Set the x coordinate and return this point."""
        self.x = value
        return self

    def at_y(self, value: T) -> Self:
        """Set the y coordinate and return this point."""
        self.y = value
        return self

    def __iadd__(self, other: "Point[T]") -> Self:
        """Add another point's coordinates in place."""
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Point[T]") -> Self:
        """Subtract another point's coordinates in place."""
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: T) -> "Point[T]":
        """New point with both coordinates scaled, keeping their types."""
        return Point(_multiply(self.x, scalar), _multiply(self.y, scalar))

    def __rmul__(self, scalar: T) -> "Point[T]":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: T) -> "Point[T]":
        """New point with both coordinates divided, keeping their types.

        Integer coordinates truncate toward zero and raise
        ``ZeroDivisionError`` on a zero divisor. Float coordinates follow
        IEEE-754 and give ``inf`` or ``nan``.
        """
        return Point(_divide(self.x, scalar), _divide(self.y, scalar))

    def distance_from(self, other: "Point[Any]") -> float:
        """Calculate Euclidean distance to another point.

        Args:
            other: Point of any numeric element type

        Returns:
            Distance as a float
        """
        dx = float(self.x) - float(other.x)
        dy = float(self.y) - float(other.y)
        return math.sqrt(dx * dx + dy * dy)

    def x_from(self, other: "Point[Any]") -> T:
        """Absolute x delta to another point, in this point's x type."""
        return type(self.x)(abs(self.x - other.x))

    def y_from(self, other: "Point[Any]") -> T:
        """Absolute y delta to another point, in this point's y type."""
        return type(self.y)(abs(self.y - other.y))

    def cast(self, element_type: Callable[[Any], U]) -> "Point[U]":
        """Create a new point with both coordinates converted.

        Args:
            element_type: Numeric constructor such as ``int`` or ``float``.
                ``int`` truncates toward zero.

        Returns:
            New Point instance
        """
        return Point(element_type(self.x), element_type(self.y))

    def copy(self) -> "Point[T]":
        """Return an independent point with the same coordinates."""
        return Point(self.x, self.y)

    __copy__ = copy

    def to_tuple(self) -> tuple[T, T]:
        """Coordinates as an (x, y) tuple."""
        return (self.x, self.y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    @classmethod
    def parse(cls, text: str) -> "Point[Any]":
        """Parse a point from ``"x,y"`` text.

        Integer literals become ``int`` coordinates, anything else ``float``.

        Raises:
            ValueError: If the text is not two comma-separated numbers
        """
        parts = [part.strip() for part in text.strip().strip("()").split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Point must be given as 'x,y', got {text!r}")
        return cls(*(_parse_number(part) for part in parts))

    def __str__(self) -> str:
        """String representation of the point."""
        return f"Point({self.x}, {self.y})"


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid coordinate: {text!r}") from None

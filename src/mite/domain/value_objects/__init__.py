"""Value objects."""

from mite.domain.value_objects.point import Point

__all__ = ["Point"]

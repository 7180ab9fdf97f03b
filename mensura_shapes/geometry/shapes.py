"""
Geometric Shapes Module
=======================

Shapes described by a set of measurements (radius, side lengths).

Design:
- Abstract Shape owns validation + storage, subclasses own the rules
- Measurements stored as read-only float64 vectors
- Fail-fast validation (ValueError), state untouched on failure
- Overflow is not an error: area -> inf, right-triangle check -> UNKNOWN
- NO logging, NO I/O (pure geometry)
"""

import sys
from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np

from mensura_shapes.geometry.tristate import TriState

MAX_MEASUREMENT = sys.float_info.max


def _as_vector(measurements: Iterable[float]) -> np.ndarray:
    """Convert raw measurements to a fresh, read-only 1-D float64 array."""
    if isinstance(measurements, (str, bytes)):
        raise ValueError(f"Measurements must be numeric, got {measurements!r}")

    try:
        raw = np.asarray(list(measurements))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Measurements must be numeric, got {measurements!r}") from e

    # Only ints and floats; strings, bytes, bools and objects are rejected
    if raw.dtype.kind not in "iuf":
        raise ValueError(f"Measurements must be numeric, got {measurements!r}")

    if raw.ndim != 1:
        raise ValueError(
            f"Measurements must be a flat sequence, got shape {raw.shape}"
        )

    values = raw.astype(np.float64)
    values.flags.writeable = False
    return values


def _check_lengths(values: np.ndarray, kind: str) -> None:
    """Every length must lie in (0, MAX_MEASUREMENT]; rejects NaN and inf."""
    for index, value in enumerate(values):
        if not 0.0 < value <= MAX_MEASUREMENT:
            raise ValueError(
                f"{kind} measurement #{index} must be in (0, {MAX_MEASUREMENT}], "
                f"got {value}"
            )


class Shape(ABC):
    """
    Abstract shape described by an ordered set of measurements.

    Subclasses implement:
        _validate(values): raise ValueError if values don't describe the shape
        _calculate_area(): area from self.measurements

    Attributes:
        measurements: Read-only float64 array, original order preserved

    Invariants:
        - measurements always pass _validate()
        - failed assignment keeps the previous measurements
    """

    def __init__(self, measurements: Iterable[float]):
        self.measurements = measurements

    @property
    def measurements(self) -> np.ndarray:
        return self._measurements

    @measurements.setter
    def measurements(self, measurements: Iterable[float]) -> None:
        values = _as_vector(measurements)
        self._validate(values)
        self._measurements = values

    @property
    def area(self) -> float:
        """Area of the shape (may be inf when the calculation overflows)."""
        return self._calculate_area()

    @classmethod
    def validate(cls, measurements: Iterable[float]) -> None:
        """
        Check measurements without building a shape.

        Raises:
            ValueError: If measurements don't describe a valid shape
        """
        cls._validate(_as_vector(measurements))

    @classmethod
    def is_valid(cls, measurements: Iterable[float]) -> bool:
        try:
            cls.validate(measurements)
        except ValueError:
            return False
        return True

    @classmethod
    def from_measurements(cls, measurements: Iterable[float]) -> "Shape":
        """
        Build a shape from a raw measurement sequence.

        Example:
            >>> Triangle.from_measurements([3, 4, 5]).area
            6.0
        """
        shape = cls.__new__(cls)
        Shape.__init__(shape, measurements)
        return shape

    @classmethod
    @abstractmethod
    def _validate(cls, values: np.ndarray) -> None:
        """Raise ValueError if values don't describe this shape."""

    @abstractmethod
    def _calculate_area(self) -> float:
        """Compute the area from the stored measurements."""

    def __repr__(self) -> str:
        args = ", ".join(repr(float(v)) for v in self._measurements)
        return f"{type(self).__name__}({args})"


class Circle(Shape):
    """
    Circle defined by its radius.

    Example:
        >>> Circle(2.0).area
        12.566370614359172
    """

    def __init__(self, radius: float):
        super().__init__([radius])

    @property
    def radius(self) -> float:
        return float(self._measurements[0])

    @classmethod
    def _validate(cls, values: np.ndarray) -> None:
        if len(values) != 1:
            raise ValueError(
                f"Circle requires exactly 1 measurement (radius), got {len(values)}"
            )
        _check_lengths(values, "Circle")

    def _calculate_area(self) -> float:
        r = self._measurements[0]
        with np.errstate(over="ignore"):
            return float(np.pi * r * r)


class Triangle(Shape):
    """
    Triangle defined by its three side lengths.

    Validation:
    - exactly 3 sides, each in (0, max float]
    - strict triangle inequality for every side

    Example:
        >>> t = Triangle(3, 4, 5)
        >>> t.area
        6.0
        >>> t.is_right_triangle()
        <TriState.TRUE: 'true'>
    """

    def __init__(self, side_a: float, side_b: float, side_c: float):
        super().__init__([side_a, side_b, side_c])

    @property
    def sides(self) -> tuple:
        return tuple(float(v) for v in self._measurements)

    @classmethod
    def _validate(cls, values: np.ndarray) -> None:
        if len(values) != 3:
            raise ValueError(
                f"Triangle requires exactly 3 measurements (sides), got {len(values)}"
            )
        _check_lengths(values, "Triangle")

        a, b, c = values
        # Sums may overflow to inf, which still satisfies the inequality
        with np.errstate(over="ignore"):
            satisfied = a + b > c and a + c > b and b + c > a
        if not satisfied:
            raise ValueError(
                f"Sides {float(a)}, {float(b)}, {float(c)} violate the triangle "
                f"inequality (each side must be shorter than the sum of the others)"
            )

    def _calculate_area(self) -> float:
        """Heron's formula. Returns inf if an intermediate overflows."""
        a, b, c = self._measurements
        with np.errstate(over="ignore"):
            p = (a + b + c) / 2
            product = p * (p - a) * (p - b) * (p - c)
            # Rounding on near-degenerate triangles can dip below zero
            return float(np.sqrt(max(product, 0.0)))

    def is_right_triangle(self) -> TriState:
        """
        Check whether the largest side squared equals the sum of the other
        two squared (exact float equality).

        Returns:
            TriState.TRUE / TriState.FALSE, or TriState.UNKNOWN when squaring
            overflows to inf
        """
        c, b, a = np.sort(self._measurements)[::-1]

        with np.errstate(over="ignore"):
            c_sqr = np.power(c, 2)
            legs_sqr = np.power(b, 2) + np.power(a, 2)

        if np.isinf(c_sqr) or np.isinf(legs_sqr):
            return TriState.UNKNOWN

        return TriState.from_bool(bool(c_sqr == legs_sqr))

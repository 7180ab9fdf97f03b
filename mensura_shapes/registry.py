"""
ShapeRegistry - Explicit shape kind registration

Bounded Context: Mapping kind names ("circle", "triangle") to Shape classes
Responsibilities:
  - Register shape classes under a kind name
  - Build shapes from raw measurements by kind
  - Provide introspection (available_kinds, get_help)

Pattern: Registry with explicit registration
"""

from typing import Dict, Iterable, Optional, Set, Type

from mensura_shapes.geometry import Circle, Shape, Triangle
from mensura_shapes.logging import LogEvent, StructuredLogger


class ShapeNotAvailableError(Exception):
    """Raised when creating a shape of an unregistered kind"""
    pass


class ShapeRegistry:
    """
    Registry of shape kinds.

    Key Features:
      - Fail-fast: unknown kinds rejected with ShapeNotAvailableError
      - Introspection: available kinds and descriptions at runtime
      - Logging: creations and rejections reported when a logger is given

    Example:
        registry = ShapeRegistry()
        registry.register('circle', Circle, "Circle from its radius")

        circle = registry.create('circle', [2.0])

        try:
            registry.create('hexagon', [1.0])
        except ShapeNotAvailableError as e:
            print(f"Shape not available: {e}")
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._shapes: Dict[str, Type[Shape]] = {}
        self._descriptions: Dict[str, str] = {}
        self._logger = logger

    def register(self, kind: str, shape_cls: Type[Shape], description: str) -> None:
        """
        Register a shape class under a kind name.

        Args:
            kind: Kind name (case-insensitive, stored lowercase)
            shape_cls: Concrete Shape subclass
            description: Human-readable description for help text

        Raises:
            TypeError: If shape_cls is not a Shape subclass
            ValueError: If kind is empty or already registered
        """
        if not (isinstance(shape_cls, type) and issubclass(shape_cls, Shape)):
            raise TypeError(f"{shape_cls!r} is not a Shape subclass")

        key = kind.strip().lower()
        if not key:
            raise ValueError("Shape kind cannot be empty")
        if key in self._shapes:
            raise ValueError(f"Shape kind '{key}' already registered")

        self._shapes[key] = shape_cls
        self._descriptions[key] = description

        if self._logger:
            self._logger.debug(
                event=LogEvent.KIND_REGISTERED,
                message=f"Registered shape kind '{key}'",
                metadata={'kind': key, 'class': shape_cls.__name__}
            )

    def create(self, kind: str, measurements: Iterable[float]) -> Shape:
        """
        Build a shape of the given kind.

        Args:
            kind: Registered kind name
            measurements: Raw measurements, in the shape's order

        Returns:
            Validated Shape instance

        Raises:
            ShapeNotAvailableError: If kind is not registered
            ValueError: If measurements don't describe a valid shape
        """
        key = kind.strip().lower()
        if key not in self._shapes:
            available = ', '.join(sorted(self._shapes.keys()))
            raise ShapeNotAvailableError(
                f"Shape kind '{kind}' not available. "
                f"Available kinds: {available}"
            )

        try:
            shape = self._shapes[key].from_measurements(measurements)
        except ValueError as e:
            if self._logger:
                self._logger.warning(
                    event=LogEvent.SHAPE_REJECTED,
                    message=str(e),
                    metadata={'kind': key, 'measurements': repr(measurements)}
                )
            raise

        if self._logger:
            self._logger.info(
                event=LogEvent.SHAPE_CREATED,
                message=f"Created {key}",
                metadata={'kind': key, 'measurements': shape.measurements.tolist()}
            )
        return shape

    def is_available(self, kind: str) -> bool:
        return kind.strip().lower() in self._shapes

    @property
    def available_kinds(self) -> Set[str]:
        """Registered kind names."""
        return set(self._shapes.keys())

    def get_help(self) -> Dict[str, str]:
        """Kind name -> description, sorted by kind."""
        return {kind: self._descriptions[kind] for kind in sorted(self._descriptions)}

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, kind: str) -> bool:
        return self.is_available(kind)


def default_registry(logger: Optional[StructuredLogger] = None) -> ShapeRegistry:
    """Registry with the built-in circle and triangle kinds."""
    registry = ShapeRegistry(logger=logger)
    registry.register('circle', Circle, "Circle from its radius")
    registry.register('triangle', Triangle, "Triangle from its three side lengths")
    return registry

"""Core geometry value objects in millimetres."""

from __future__ import annotations

from dataclasses import dataclass

RIGHT_ANGLES: tuple[int, ...] = (0, 90, 180, 270)


def normalize_rotation(rotation: float) -> int:
    """Normalize a rotation in degrees to the nearest right angle in [0, 360)."""
    quarter_turns = int(round(rotation / 90.0)) % 4
    return quarter_turns * 90


def is_quarter_turn(rotation: int) -> bool:
    """Check whether a rotation swaps width and depth (90 or 270 degrees)."""
    return rotation % 360 in (90, 270)


@dataclass(frozen=True)
class Vector3:
    """A point, offset or set of Euler angles in 3D space.

    Unlike Size3, components may be negative: part positions are measured
    from the cabinet centre and rotations may be negative angles.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Size3:
    """Immutable box size in millimetres."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def volume(self) -> float:
        """Volume in cubic millimetres."""
        return self.width * self.height * self.depth

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.width, self.height, self.depth)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned floor footprint of a placed item in room coordinates.

    Room coordinates put the back wall at z = 0 and the left wall at
    x = 0, so ``back`` is the smaller z value and ``front`` the larger.

    Attributes:
        left: Minimum x edge.
        right: Maximum x edge.
        back: Minimum z edge.
        front: Maximum z edge.
    """

    left: float
    right: float
    back: float
    front: float

    @classmethod
    def around(
        cls, center_x: float, center_z: float, width: float, depth: float
    ) -> BoundingBox:
        """Create a footprint of the given size centred on a point."""
        half_w = width / 2
        half_d = depth / 2
        return cls(
            left=center_x - half_w,
            right=center_x + half_w,
            back=center_z - half_d,
            front=center_z + half_d,
        )

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_z(self) -> float:
        return (self.back + self.front) / 2

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def depth(self) -> float:
        return self.front - self.back

    def overlaps(self, other: BoundingBox, padding: float = 0.0) -> bool:
        """Check whether two footprints overlap by more than ``padding``.

        Touching boxes never overlap. A positive padding tolerates shallow
        overlaps up to that amount on each axis.
        """
        overlap_x = (
            self.right > other.left + padding and self.left < other.right - padding
        )
        overlap_z = (
            self.front > other.back + padding and self.back < other.front - padding
        )
        return overlap_x and overlap_z

"""Translation-only transform used along mesh tree edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Self

import numpy as np
from numpy.typing import NDArray


@dataclass(eq=False)
class Transform:
    """A pure 3D translation.

    Composition is componentwise addition and the identity is the zero
    vector. Rotation and scale are deliberately not modelled.
    """

    translation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.translation = np.asarray(self.translation, dtype=np.float64).reshape(3)

    @staticmethod
    def zero() -> Transform:
        """Create the zero translation."""
        return Transform()

    @staticmethod
    def identity() -> Transform:
        """Create an identity transform (same as zero())."""
        return Transform()

    @property
    def x(self) -> float:
        return float(self.translation[0])

    @property
    def y(self) -> float:
        return float(self.translation[1])

    @property
    def z(self) -> float:
        return float(self.translation[2])

    def is_identity(self) -> bool:
        """True when every component is exactly zero."""
        return not np.any(self.translation)

    def to_matrix(self) -> NDArray[np.float64]:
        """Convert to a 4x4 homogeneous transformation matrix."""
        t = np.eye(4, dtype=np.float64)
        t[:3, 3] = self.translation
        return t

    def to_list(self) -> list[float]:
        return [float(v) for v in self.translation]

    @classmethod
    def from_list(cls, values: Iterable[float]) -> Self:
        """Create a Transform from an [x, y, z] sequence.

        Raises:
            ValueError: If values does not hold exactly three numbers
        """
        values = list(values)
        if len(values) != 3:
            raise ValueError(f"Translation needs 3 components, got {len(values)}")
        return cls(translation=np.array(values, dtype=np.float64))

    def copy(self) -> Self:
        """Create a deep copy of this transform."""
        return type(self)(translation=self.translation.copy())

    def __add__(self, other: Transform) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(translation=self.translation + other.translation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.translation, other.translation))

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __repr__(self) -> str:
        return f"Transform({self.x:g}, {self.y:g}, {self.z:g})"


def compose(a: Transform, b: Transform) -> Transform:
    """Compose two translations (order does not affect the result)."""
    return a + b

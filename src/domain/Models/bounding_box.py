# src/domain/Models/bounding_box.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class BoundingBox:
    """
    Rectángulo en coordenadas enteras de la imagen (left, top, right, bottom).
    Inmutable y hashable: forma parte de la identidad de DetectedPlate.
    """
    left: int
    top: int
    right: int
    bottom: int

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def expand(self, padding: int) -> "BoundingBox":
        """Devuelve una caja agrandada `padding` píxeles por cada lado."""
        return BoundingBox(
            left=self.left - padding,
            top=self.top - padding,
            right=self.right + padding,
            bottom=self.bottom + padding,
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def overlaps_horizontally(self, other: "BoundingBox") -> bool:
        return self.left <= other.right and other.left <= self.right

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    @staticmethod
    def from_points(points: Iterable[Sequence[float]]) -> "BoundingBox":
        """
        Caja alineada a los ejes alrededor de un polígono
        (EasyOCR devuelve cuadriláteros de 4 puntos).
        """
        pts = [(float(p[0]), float(p[1])) for p in points]
        if not pts:
            raise ValueError("se necesita al menos un punto")
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return BoundingBox(
            left=int(min(xs)),
            top=int(min(ys)),
            right=int(round(max(xs))),
            bottom=int(round(max(ys))),
        )

# src/domain/Models/text_region.py
from dataclasses import dataclass, field
from typing import List, Optional

from src.domain.Models.bounding_box import BoundingBox


@dataclass(frozen=True)
class TextRegion:
    """
    Una línea de texto reconocida por el motor OCR.
    Solo lectura para el matcher.
    """
    text: str                                  # texto reconocido
    bounding_box: Optional[BoundingBox] = None  # puede faltar
    confidence: float = 0.0                    # [0, 1]


@dataclass
class TextBlock:
    """
    Bloque de líneas contiguas tal como lo agrupa el OCR.
    """
    lines: List[TextRegion] = field(default_factory=list)
    bounding_box: Optional[BoundingBox] = None

    @property
    def text(self) -> str:
        return " ".join(line.text for line in self.lines)


@dataclass
class OCRResult:
    """
    Salida completa del OCR para una imagen.
    """
    blocks: List[TextBlock] = field(default_factory=list)

    def lines(self) -> List[TextRegion]:
        return [line for block in self.blocks for line in block.lines]

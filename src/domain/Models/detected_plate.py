from dataclasses import dataclass
from typing import Optional

from src.domain.Models.bounding_box import BoundingBox


@dataclass(frozen=True)
class DetectedPlate:
    """
    Representa una placa detectada en una imagen.
    Igualdad estructural sobre (text, bounding_box, confidence): dos pasadas
    que producen la misma tripleta colapsan en un único elemento del set.
    """
    text: str                                  # subcadena que casó con un patrón
    bounding_box: Optional[BoundingBox]        # caja de la línea o bloque de origen
    confidence: float                          # confianza del OCR de origen

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "bbox": self.bounding_box.as_tuple() if self.bounding_box else None,
            "confidence": self.confidence,
        }

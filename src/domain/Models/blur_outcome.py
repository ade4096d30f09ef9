# src/domain/Models/blur_outcome.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Set

from src.domain.Models.detected_plate import DetectedPlate


@dataclass
class BlurOutcome:
    """
    Resultado de procesar una imagen completa.
    """
    success: bool
    message: str                               # mensaje para el usuario
    plates: Set[DetectedPlate] = field(default_factory=set)
    redacted: int = 0                          # placas con caja (efectivamente tapadas)
    saved_path: Optional[Path] = None
    source: Optional[str] = None

    def to_dict(self) -> dict:
        """Convierte a dict serializable."""
        return {
            "success": self.success,
            "message": self.message,
            "plates": [p.to_dict() for p in self.plates],
            "redacted": self.redacted,
            "saved_path": str(self.saved_path) if self.saved_path else None,
            "source": self.source,
        }

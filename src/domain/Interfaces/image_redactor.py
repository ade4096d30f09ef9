from abc import ABC, abstractmethod
from typing import Iterable
import numpy as np
from src.domain.Models.detected_plate import DetectedPlate

class IImageRedactor(ABC):
    """
    Tapa las regiones de placas detectadas en una imagen.
    """
    @abstractmethod
    def redact(self, image: np.ndarray, plates: Iterable[DetectedPlate]) -> np.ndarray:
        """Devuelve una copia de la imagen con cada placa tapada."""
        pass

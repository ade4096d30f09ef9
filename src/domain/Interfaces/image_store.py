# src/domain/Interfaces/image_store.py
from abc import ABC, abstractmethod
from pathlib import Path

import numpy as np


class IImageStore(ABC):
    """
    Almacenamiento local de las imágenes procesadas.
    """
    @abstractmethod
    def reserve_path(self) -> Path:
        """Reserva el siguiente nombre de archivo de la sesión."""
        pass

    @abstractmethod
    def save(self, image: np.ndarray, orientation: int) -> Path:
        """Guarda la imagen y devuelve la ruta escrita."""
        pass

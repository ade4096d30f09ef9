from abc import ABC, abstractmethod
from src.domain.Models.photo import Photo

class IImageLoader(ABC):
    """
    Decodifica una imagen desde disco.
    """
    @abstractmethod
    def load(self, path: str) -> Photo:
        """Carga la imagen ya rotada según EXIF, guardando la orientación original."""
        pass

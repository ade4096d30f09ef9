from abc import ABC, abstractmethod
from src.domain.Models.photo import Photo
from src.domain.Models.text_region import OCRResult

class IOCRReader(ABC):
    """
    Lector OCR para extraer el texto de una foto completa.
    """
    @abstractmethod
    def read_text(self, photo: Photo) -> OCRResult:
        """
        Reconoce el texto de la foto.
        Devuelve bloques de líneas con texto, caja y confianza.
        """
        pass

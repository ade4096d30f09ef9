from typing import Optional
from src.domain.Models.photo import Photo
from src.domain.Models.text_region import OCRResult
from src.domain.Interfaces.ocr_reader import IOCRReader

class DummyOCRReader(IOCRReader):
    """
    Implementación dummy que simplemente devuelve siempre el mismo resultado.
    """

    def __init__(self, result: Optional[OCRResult] = None):
        self.result = result if result is not None else OCRResult()

    def read_text(self, photo: Photo) -> OCRResult:
        return self.result

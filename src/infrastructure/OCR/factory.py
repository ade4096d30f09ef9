from src.core.config import settings
from src.domain.Interfaces.ocr_reader import IOCRReader

def create_ocr_reader() -> IOCRReader:
    if settings.ocr_backend.lower() == "dummy":
        from src.infrastructure.OCR.dummy_ocr_reader import DummyOCRReader
        return DummyOCRReader()
    else:
        from src.infrastructure.OCR.EasyOCR_OCRReader import EasyOCR_OCRReader
        return EasyOCR_OCRReader()

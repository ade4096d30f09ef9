# src/domain/Interfaces/plate_matcher.py
from typing import Protocol, Set

from src.domain.Models.detected_plate import DetectedPlate
from src.domain.Models.text_region import OCRResult


class IPlateMatcher(Protocol):
    """
    Contrato del matcher de placas.

    match devuelve el conjunto (sin duplicados exactos) de placas halladas
    en la salida OCR de una imagen. Debe ser puro y total.
    """
    def match(self, ocr_result: OCRResult) -> Set[DetectedPlate]:
        ...

# src/domain/Services/plate_matcher_service.py
from __future__ import annotations
import logging
import re
from typing import List, Optional, Pattern, Set, Tuple

from src.domain.Interfaces.plate_matcher import IPlateMatcher
from src.domain.Interfaces.text_normalizer import ITextNormalizer
from src.domain.Models.bounding_box import BoundingBox
from src.domain.Models.detected_plate import DetectedPlate
from src.domain.Models.text_region import OCRResult, TextRegion

logger = logging.getLogger(__name__)


def _compile(expr: str) -> Pattern[str]:
    # \b, \d y \s solo ASCII: el OCR puede devolver dígitos/espacios unicode
    return re.compile(expr, re.ASCII)


# Formatos de matrícula sudafricana, en orden de prueba.
SA_PLATE_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    # Provincial estándar (CA 123 GP)
    ("provincial", _compile(r"\b[A-Z]{2}\s*\d{1,3}\s*[A-Z]{2,3}\b")),
    # Formato nuevo con letras extra (DN 88 RB GP)
    ("provincial_extended", _compile(r"\b[A-Z]{2}\s*\d{2}\s*[A-Z]{2}\s*[A-Z]{2}\b")),
    # Personalizada
    ("personalized", _compile(r"\b[A-Z0-9]{1,7}\s*[A-Z]{2,3}\b")),
    # Western Cape (CJ 123 456)
    ("western_cape", _compile(r"\b[A-Z]{2}\s*\d{3}\s*\d{3}\b")),
    # Limpopo (B 123 ABC L)
    ("limpopo", _compile(r"\b[A-Z]\s*\d{3}\s*[A-Z]{3}\s*[A-Z]\b")),
    # Legacy (T 12345)
    ("legacy", _compile(r"\b[A-Z]\s*\d{1,5}\b")),
    # Con guiones (ND-123-456)
    ("dashed", _compile(r"\b[A-Z]{2}-\d{3}-\d{3}\b")),
    # Gauteng (CF 90 MW GP); misma expresión que provincial_extended,
    # el set absorbe las coincidencias repetidas
    ("gauteng", _compile(r"\b[A-Z]{2}\s*\d{2}\s*[A-Z]{2}\s*[A-Z]{2}\b")),
    # Personalizada corta (xyp927)
    ("custom_short", _compile(r"\b[a-zA-Z]{3}\d{3}\b")),
]


class PlateMatcherService(IPlateMatcher):
    """
    Matcher de placas sobre la salida del OCR.

    - tres pasadas:
        1) cada línea, tal cual y sin espacios
        2) cada bloque con sus líneas unidas por un espacio
           (caja del bloque, confianza de la primera línea)
        3) cada línea con variantes que corrigen confusiones del OCR
    - cada patrón aporta como mucho su primera coincidencia por texto
    - acumulación en un set: duplicados exactos colapsan
    - puro: no guarda estado entre llamadas
    """

    def __init__(
        self,
        normalizer: ITextNormalizer,
        patterns: Optional[List[Tuple[str, Pattern[str]]]] = None,
    ):
        self.normalizer = normalizer
        self.patterns = patterns if patterns is not None else SA_PLATE_PATTERNS

    # ---------------------------------------------------------
    #  API PRINCIPAL
    # ---------------------------------------------------------
    def match(self, ocr_result: OCRResult) -> Set[DetectedPlate]:
        detected: Set[DetectedPlate] = set()
        blocks = ocr_result.blocks if ocr_result else []

        # 1) líneas individuales
        for block in blocks:
            for line in block.lines:
                self._match_line(line, detected)

        # 2) líneas unidas dentro del bloque
        for block in blocks:
            if not block.lines:
                continue
            self.match_text(block.text, block.bounding_box, block.lines[0].confidence, detected)

        # 3) variantes de limpieza
        for block in blocks:
            for line in block.lines:
                for variant in self.normalizer.variants(line.text):
                    self.match_text(variant, line.bounding_box, line.confidence, detected)

        logger.debug(f"{len(detected)} placas candidatas en {len(blocks)} bloques")
        return detected

    def match_text(
        self,
        text: str,
        bounding_box: Optional[BoundingBox],
        confidence: float,
        detected: Set[DetectedPlate],
    ) -> None:
        """Prueba todos los patrones sobre `text` y añade la primera coincidencia de cada uno."""
        if not text:
            return

        for name, pattern in self.patterns:
            m = pattern.search(text)
            if m is None:
                continue
            plate = DetectedPlate(text=m.group(0), bounding_box=bounding_box, confidence=confidence)
            if plate not in detected:
                logger.debug(f"Patrón '{name}' casó '{plate.text}' en '{text}'")
                detected.add(plate)

    # ---------------------------------------------------------
    #  HELPERS
    # ---------------------------------------------------------
    def _match_line(self, line: TextRegion, detected: Set[DetectedPlate]) -> None:
        self.match_text(line.text, line.bounding_box, line.confidence, detected)
        self.match_text(line.text.replace(" ", ""), line.bounding_box, line.confidence, detected)

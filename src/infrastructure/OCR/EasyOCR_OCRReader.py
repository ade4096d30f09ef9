import logging
from typing import Any, List, Optional

from src.domain.Models.bounding_box import BoundingBox
from src.domain.Models.photo import Photo
from src.domain.Models.text_region import OCRResult, TextBlock, TextRegion
from src.domain.Interfaces.ocr_reader import IOCRReader
from src.core.config import settings

logger = logging.getLogger(__name__)


class EasyOCR_OCRReader(IOCRReader):
    """
    Implementación usando EasyOCR sobre la foto completa:
    - Filtro de líneas con confianza insuficiente
    - Agrupación de líneas en bloques (vecinas en vertical y solapadas en horizontal)
    """
    def __init__(
        self,
        reader: Any = None,
        lang: Optional[str] = None,
        gpu: Optional[bool] = None,
        min_confidence: Optional[float] = None,
        block_y_ths: Optional[float] = None,
    ):
        if reader is None:
            import easyocr
            reader = easyocr.Reader(
                [lang or settings.ocr_lang],
                gpu=settings.ocr_gpu if gpu is None else gpu,
            )
        self.reader = reader
        self.min_confidence = settings.ocr_min_confidence if min_confidence is None else min_confidence
        self.block_y_ths = settings.ocr_block_y_ths if block_y_ths is None else block_y_ths

    def read_text(self, photo: Photo) -> OCRResult:
        # Ejecutar OCR: [(puntos, texto, confianza), ...]
        results = self.reader.readtext(photo.image)

        lines: List[TextRegion] = []
        for points, text, confidence in results:
            if not text or not text.strip():
                continue
            if confidence < self.min_confidence:
                continue
            lines.append(TextRegion(
                text=text.strip(),
                bounding_box=BoundingBox.from_points(points),
                confidence=float(confidence),
            ))

        blocks = self.group_blocks(lines)
        logger.debug(f"OCR: {len(results)} resultados, {len(lines)} líneas, {len(blocks)} bloques")
        return OCRResult(blocks=blocks)

    def group_blocks(self, lines: List[TextRegion]) -> List[TextBlock]:
        """
        Une líneas consecutivas (de arriba a abajo) en bloques cuando el hueco
        vertical no supera block_y_ths * alto de línea y se solapan en horizontal.
        """
        ordered = sorted(lines, key=lambda l: (l.bounding_box.top, l.bounding_box.left))
        blocks: List[TextBlock] = []

        for line in ordered:
            box = line.bounding_box
            current = blocks[-1] if blocks else None
            if current is not None:
                gap = box.top - current.bounding_box.bottom
                if gap <= self.block_y_ths * max(box.height, 1) and current.bounding_box.overlaps_horizontally(box):
                    current.lines.append(line)
                    current.bounding_box = current.bounding_box.union(box)
                    continue
            blocks.append(TextBlock(lines=[line], bounding_box=box))

        return blocks

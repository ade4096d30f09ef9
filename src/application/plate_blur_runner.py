import json
import logging
from typing import Iterable, List

from src.application.plate_blur_service import PlateBlurService
from src.domain.Models.blur_outcome import BlurOutcome
from src.domain.Services.plate_matcher_service import PlateMatcherService
from src.infrastructure.Image.opencv_redactor import OpenCVRedactor
from src.infrastructure.Image.pillow_image_loader import PillowImageLoader
from src.infrastructure.Normalizer.plate_variants import PlateTextVariants
from src.infrastructure.OCR.factory import create_ocr_reader
from src.infrastructure.Storage.sequential_image_store import SequentialImageStore
from src.core.config import settings

logger = logging.getLogger(__name__)


def create_plate_blur_service() -> PlateBlurService:
    """Arma el servicio con las implementaciones configuradas en settings."""
    return PlateBlurService(
        loader=PillowImageLoader(),
        ocr_reader=create_ocr_reader(),
        matcher=PlateMatcherService(normalizer=PlateTextVariants()),
        redactor=OpenCVRedactor(
            padding=settings.redaction_padding,
            blur_radius=settings.blur_radius,
            color=settings.redaction_color,
        ),
        store=SequentialImageStore(
            output_dir=settings.output_dir,
            lot_number=settings.lot_number,
            image_number=settings.image_start_number,
            quality=settings.jpeg_quality,
        ),
    )


def run_images(service: PlateBlurService, paths: Iterable[str]) -> List[BlurOutcome]:
    """
    Procesa las imágenes una a una (nunca más de una en vuelo).
    Un fallo no detiene las siguientes.
    """
    outcomes = []
    for path in paths:
        logger.info(f"🖼️ Procesando {path}")
        outcome = service.process(path)
        if outcome.success:
            logger.info(outcome.message)
        else:
            logger.error(outcome.message)
        logger.debug(json.dumps(outcome.to_dict(), ensure_ascii=False))
        outcomes.append(outcome)
    return outcomes

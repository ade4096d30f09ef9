import logging
import time
from typing import Optional

from src.monitoring.metrics import (
    images_processed_total, plates_detected_total,
    ocr_latency, pipeline_latency
)

from src.domain.Models.blur_outcome import BlurOutcome
from src.domain.Interfaces.image_loader import IImageLoader
from src.domain.Interfaces.ocr_reader import IOCRReader
from src.domain.Interfaces.plate_matcher import IPlateMatcher
from src.domain.Interfaces.image_redactor import IImageRedactor
from src.domain.Interfaces.image_store import IImageStore

logger = logging.getLogger(__name__)


class PlateBlurService:
    """
    Procesa una imagen por llamada: carga -> OCR -> placas -> tapado -> guardado.
    Cualquier fallo aborta solo la imagen actual y se devuelve como
    BlurOutcome con success=False; el servicio sigue usable.
    """

    def __init__(
        self,
        loader: IImageLoader,
        ocr_reader: IOCRReader,
        matcher: IPlateMatcher,
        redactor: IImageRedactor,
        store: IImageStore,
    ):
        self.loader = loader
        self.ocr_reader = ocr_reader
        self.matcher = matcher
        self.redactor = redactor
        self.store = store

    # ---------------------------------------------------------
    # PROCESSING (por imagen)
    # ---------------------------------------------------------
    def process(self, path: Optional[str]) -> BlurOutcome:
        if not path:
            return self._fail("No image available to process", None)

        t0 = time.perf_counter()

        # carga
        try:
            photo = self.loader.load(path)
        except Exception as e:
            logger.exception(f"Error cargando {path}")
            return self._fail(f"Error loading image: {e}", path)

        # ocr
        try:
            t1 = time.perf_counter()
            ocr_result = self.ocr_reader.read_text(photo)
            ocr_latency.set(time.perf_counter() - t1)
        except Exception as e:
            logger.exception(f"OCR falló para {path}")
            return self._fail(f"Text recognition failed: {e}", path)

        # placas + tapado
        try:
            plates = self.matcher.match(ocr_result)
            redacted_image = self.redactor.redact(photo.data, plates)
            redacted = sum(1 for p in plates if p.bounding_box is not None)
        except Exception as e:
            logger.exception(f"Error procesando {path}")
            return self._fail(f"Error processing image: {e}", path)

        # guardado
        try:
            saved_path = self.store.save(redacted_image, photo.orientation)
        except Exception as e:
            logger.exception(f"Error guardando {path}")
            return self._fail(f"Error saving image: {e}", path)

        plates_detected_total.inc(len(plates))
        images_processed_total.labels(status="ok").inc()
        pipeline_latency.set(time.perf_counter() - t0)

        logger.debug(
            f"{path}: plates={len(plates)} redacted={redacted} saved={saved_path}"
        )

        return BlurOutcome(
            success=True,
            message=f"Found and blurred {len(plates)} license plates. Saved to: {saved_path.name}",
            plates=plates,
            redacted=redacted,
            saved_path=saved_path,
            source=path,
        )

    def _fail(self, message: str, path: Optional[str]) -> BlurOutcome:
        images_processed_total.labels(status="error").inc()
        return BlurOutcome(success=False, message=message, source=path)

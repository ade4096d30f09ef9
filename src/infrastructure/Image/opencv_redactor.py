# src/infrastructure/Image/opencv_redactor.py
import logging
import math
from typing import Iterable, Optional, Tuple

import cv2
import numpy as np

from src.domain.Interfaces.image_redactor import IImageRedactor
from src.domain.Models.detected_plate import DetectedPlate
from src.core.config import settings

logger = logging.getLogger(__name__)

# Conversión radio -> sigma del blur de máscara (la misma que usa Skia)
_BLUR_SIGMA_SCALE = 0.57735


class OpenCVRedactor(IImageRedactor):
    """
    Tapa cada placa con un rectángulo opaco de bordes difuminados:
    - caja expandida `padding` píxeles por lado
    - máscara rectangular suavizada con GaussianBlur
    - mezcla alfa del color de relleno sobre la imagen
    Placas sin caja se ignoran.
    """

    def __init__(
        self,
        padding: Optional[int] = None,
        blur_radius: Optional[float] = None,
        color: Optional[Tuple[int, int, int]] = None,
    ):
        self.padding = settings.redaction_padding if padding is None else padding
        self.blur_radius = settings.blur_radius if blur_radius is None else blur_radius
        self.color = tuple(settings.redaction_color if color is None else color)

    def redact(self, image: np.ndarray, plates: Iterable[DetectedPlate]) -> np.ndarray:
        output = image.copy()

        for plate in plates:
            if plate.bounding_box is None:
                logger.debug(f"Placa '{plate.text}' sin caja, no se tapa")
                continue
            self._fill(output, plate)

        return output

    def _fill(self, image: np.ndarray, plate: DetectedPlate) -> None:
        """Tapa una placa sobre `image` (in place), solo en la zona que alcanza el blur."""
        box = plate.bounding_box.expand(self.padding)
        h, w = image.shape[:2]

        sigma = self.blur_radius * _BLUR_SIGMA_SCALE + 0.5 if self.blur_radius > 0 else 0.0
        margin = int(math.ceil(3 * sigma))

        # zona que alcanza el blur (sin recortar) y su parte dentro de la imagen
        zx0, zy0 = box.left - margin, box.top - margin
        zx1, zy1 = box.right + margin + 1, box.bottom + margin + 1
        x0, y0 = max(zx0, 0), max(zy0, 0)
        x1, y1 = min(zx1, w), min(zy1, h)
        if x0 >= x1 or y0 >= y1:
            return

        # la máscara cubre la zona entera para que el borde de la imagen no aclare el relleno
        mask = np.zeros((zy1 - zy0, zx1 - zx0), dtype=np.float32)
        cv2.rectangle(mask, (margin, margin), (box.right - zx0, box.bottom - zy0), 1.0, thickness=-1)

        if sigma:
            mask = cv2.GaussianBlur(mask, (0, 0), sigmaX=sigma, sigmaY=sigma, borderType=cv2.BORDER_CONSTANT)
        mask = mask[y0 - zy0:y1 - zy0, x0 - zx0:x1 - zx0]

        region = image[y0:y1, x0:x1]
        if image.ndim == 3:
            mask = mask[:, :, None]
            fill = np.array(self.color[: image.shape[2]], dtype=np.float32)
        else:
            fill = np.float32(self.color[0])

        blended = region.astype(np.float32) * (1.0 - mask) + fill * mask
        image[y0:y1, x0:x1] = np.clip(np.rint(blended), 0, 255).astype(image.dtype)

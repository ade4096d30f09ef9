import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
from PIL import Image

from src.domain.Interfaces.image_store import IImageStore
from src.core.config import settings

logger = logging.getLogger(__name__)

EXIF_ORIENTATION = 0x0112


class SequentialImageStore(IImageStore):
    """
    Guarda imágenes procesadas como `<lote>-<imagen>.jpg`:
    - el número de imagen se incrementa por cada archivo reservado
    - un archivo previo con el mismo nombre se reemplaza
    - se reescribe el tag EXIF de orientación original
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        lot_number: Optional[int] = None,
        image_number: Optional[int] = None,
        quality: Optional[int] = None,
    ):
        self.output_dir = Path(settings.output_dir if output_dir is None else output_dir)
        self.lot_number = settings.lot_number if lot_number is None else lot_number
        # primer número de cada lote
        self.first_image_number = settings.image_start_number if image_number is None else image_number
        self.image_number = self.first_image_number
        self.quality = settings.jpeg_quality if quality is None else quality

    def reserve_path(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)

        path = self.output_dir / f"{self.lot_number}-{self.image_number}.jpg"
        if path.exists():
            logger.info(f"Reemplazando archivo existente {path}")
            path.unlink()
        path.touch()

        self.image_number += 1
        return path

    def save(self, image: np.ndarray, orientation: int) -> Path:
        path = self.reserve_path()

        rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB) if image.ndim == 3 else image
        exif = Image.Exif()
        exif[EXIF_ORIENTATION] = int(orientation)

        Image.fromarray(rgb).save(path, format="JPEG", quality=self.quality, exif=exif)
        logger.info(f"Imagen guardada en {path} (orientación {orientation})")
        return path

    def start_new_lot(self) -> int:
        """Pasa al siguiente lote y reinicia la numeración de imágenes."""
        self.lot_number += 1
        self.image_number = self.first_image_number
        return self.lot_number

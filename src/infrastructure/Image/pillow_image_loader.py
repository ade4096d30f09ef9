import time
import cv2
import numpy as np
from PIL import Image, ImageOps

from src.domain.Models.photo import Photo, ORIENTATION_NORMAL
from src.domain.Interfaces.image_loader import IImageLoader

# Tag EXIF "Orientation"
EXIF_ORIENTATION = 0x0112


class PillowImageLoader(IImageLoader):
    """
    Carga imágenes con Pillow:
    - lee la orientación EXIF (1 si no hay)
    - rota/espeja la imagen para dejarla derecha
    - devuelve BGR para trabajar con OpenCV
    """

    def load(self, path: str) -> Photo:
        with Image.open(path) as img:
            orientation = int(img.getexif().get(EXIF_ORIENTATION, ORIENTATION_NORMAL))
            upright = ImageOps.exif_transpose(img).convert("RGB")

        data = cv2.cvtColor(np.asarray(upright), cv2.COLOR_RGB2BGR)
        return Photo(
            data=data,
            orientation=orientation,
            source=str(path),
            timestamp=time.time(),
        )

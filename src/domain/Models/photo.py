from dataclasses import dataclass
import numpy as np

# Valor EXIF de orientación "normal"
ORIENTATION_NORMAL = 1


@dataclass
class Photo:
    """
    Representa una foto ya decodificada y rotada según su EXIF.
    """
    data: np.ndarray   # imagen en formato numpy array (BGR)
    orientation: int   # tag EXIF de orientación original (1..8)
    source: str        # ruta de la que se cargó
    timestamp: float   # momento en que se cargó

    @property
    def image(self) -> np.ndarray:
        """Alias para compatibilidad con librerías que esperan 'image'."""
        return self.data

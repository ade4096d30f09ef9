# src/infrastructure/Normalizer/plate_variants.py
from typing import List, Tuple
from src.domain.Interfaces.text_normalizer import ITextNormalizer


class PlateTextVariants(ITextNormalizer):
    """
    Genera variantes del texto de una línea para tolerar ruido del OCR:
    - Original
    - Sin espacios
    - Sustituciones de un carácter (0/O, 1/I, 5/S, 8/B) en ambos sentidos
    - Mayúsculas
    """
    CONFUSIONS: Tuple[Tuple[str, str], ...] = (
        ("0", "O"),
        ("O", "0"),
        ("I", "1"),
        ("1", "I"),
        ("S", "5"),
        ("5", "S"),
        ("B", "8"),
        ("8", "B"),
    )

    def variants(self, text: str) -> List[str]:
        if not text:
            return []

        out = [text, text.replace(" ", "")]
        out.extend(text.replace(src, dst) for src, dst in self.CONFUSIONS)
        out.append(text.upper())
        return out

import numpy as np

from src.domain.Models.bounding_box import BoundingBox
from src.domain.Models.photo import Photo
from src.infrastructure.OCR.EasyOCR_OCRReader import EasyOCR_OCRReader


class FakeReader:
    """Imita easyocr.Reader.readtext."""

    def __init__(self, results):
        self.results = results
        self.images = []

    def readtext(self, image):
        self.images.append(image)
        return self.results


def _quad(l, t, r, b):
    return [[l, t], [r, t], [r, b], [l, b]]


def _photo():
    return Photo(data=np.zeros((300, 300, 3), dtype=np.uint8), orientation=1, source="mem", timestamp=0.0)


def test_lines_grouped_into_blocks():
    fake = FakeReader([
        (_quad(10, 10, 110, 40), "CA 123", 0.9),
        (_quad(12, 45, 60, 75), "GP", 0.8),
        (_quad(10, 200, 100, 230), "far away", 0.7),
    ])
    reader = EasyOCR_OCRReader(reader=fake, min_confidence=0.0, block_y_ths=0.5)

    result = reader.read_text(_photo())

    assert len(fake.images) == 1
    assert len(result.blocks) == 2
    first, second = result.blocks
    assert [l.text for l in first.lines] == ["CA 123", "GP"]
    assert first.text == "CA 123 GP"
    assert first.bounding_box == BoundingBox(10, 10, 110, 75)
    assert second.lines[0].text == "far away"


def test_no_horizontal_overlap_starts_new_block():
    fake = FakeReader([
        (_quad(10, 10, 50, 40), "CA", 0.9),
        (_quad(200, 42, 260, 70), "GP", 0.9),
    ])
    result = EasyOCR_OCRReader(reader=fake, min_confidence=0.0, block_y_ths=0.5).read_text(_photo())

    assert len(result.blocks) == 2


def test_low_confidence_and_blank_lines_dropped():
    fake = FakeReader([
        (_quad(10, 10, 50, 40), "CA 123 GP", 0.3),
        (_quad(10, 100, 50, 140), "   ", 0.99),
        (_quad(10, 200, 50, 240), " ND-123-456 ", 0.95),
    ])
    result = EasyOCR_OCRReader(reader=fake, min_confidence=0.5, block_y_ths=0.5).read_text(_photo())

    assert [l.text for l in result.lines()] == ["ND-123-456"]
    assert result.lines()[0].confidence == 0.95


def test_bounding_box_from_points():
    box = BoundingBox.from_points([[10.2, 5.0], [50.7, 6.0], [49.0, 30.4], [9.9, 29.0]])

    assert box == BoundingBox(9, 5, 51, 30)
    assert box.expand(40) == BoundingBox(-31, -35, 91, 70)

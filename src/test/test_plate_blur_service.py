import json
import logging

import pytest
from PIL import Image

from src.application.plate_blur_runner import run_images
from src.application.plate_blur_service import PlateBlurService
from src.domain.Models.bounding_box import BoundingBox
from src.domain.Models.text_region import OCRResult, TextBlock, TextRegion
from src.domain.Services.plate_matcher_service import PlateMatcherService
from src.infrastructure.Image.opencv_redactor import OpenCVRedactor
from src.infrastructure.Image.pillow_image_loader import PillowImageLoader, EXIF_ORIENTATION
from src.infrastructure.Normalizer.plate_variants import PlateTextVariants
from src.infrastructure.OCR.dummy_ocr_reader import DummyOCRReader
from src.infrastructure.Storage.sequential_image_store import SequentialImageStore


BOX = BoundingBox(100, 100, 200, 140)


def _ocr_with_plate():
    line = TextRegion("ND-123-456", BOX, 0.9)
    return OCRResult(blocks=[TextBlock(lines=[line], bounding_box=BOX)])


class FailingOCRReader(DummyOCRReader):
    def read_text(self, photo):
        raise RuntimeError("model not loaded")


def _service(tmp_path, ocr_reader):
    return PlateBlurService(
        loader=PillowImageLoader(),
        ocr_reader=ocr_reader,
        matcher=PlateMatcherService(normalizer=PlateTextVariants()),
        redactor=OpenCVRedactor(padding=40, blur_radius=60),
        store=SequentialImageStore(output_dir=str(tmp_path / "out"), lot_number=1, image_number=1),
    )


@pytest.fixture
def photo_path(tmp_path):
    path = tmp_path / "input.jpg"
    Image.new("RGB", (400, 300), (255, 255, 255)).save(path, format="JPEG")
    return str(path)


def test_process_blurs_and_saves(tmp_path, photo_path):
    service = _service(tmp_path, DummyOCRReader(_ocr_with_plate()))

    outcome = service.process(photo_path)

    assert outcome.success
    assert outcome.saved_path == tmp_path / "out" / "1-1.jpg"
    assert outcome.saved_path.exists()
    assert "ND-123-456" in {p.text for p in outcome.plates}
    assert outcome.redacted == len(outcome.plates)
    assert outcome.message == (
        f"Found and blurred {len(outcome.plates)} license plates. Saved to: 1-1.jpg"
    )
    with Image.open(outcome.saved_path) as img:
        # centro de la placa tapado
        assert max(img.convert("RGB").getpixel((150, 120))) < 40


def test_no_plates_still_saves(tmp_path, photo_path):
    outcome = _service(tmp_path, DummyOCRReader()).process(photo_path)

    assert outcome.success
    assert outcome.plates == set()
    assert outcome.message == "Found and blurred 0 license plates. Saved to: 1-1.jpg"


def test_no_image(tmp_path):
    outcome = _service(tmp_path, DummyOCRReader()).process(None)

    assert not outcome.success
    assert outcome.message == "No image available to process"


def test_load_failure_then_next_image_works(tmp_path, photo_path):
    service = _service(tmp_path, DummyOCRReader(_ocr_with_plate()))

    failed = service.process(str(tmp_path / "missing.jpg"))
    ok = service.process(photo_path)

    assert not failed.success
    assert failed.message.startswith("Error loading image: ")
    assert failed.saved_path is None
    assert ok.success
    # un fallo de carga no consume número de imagen
    assert ok.saved_path.name == "1-1.jpg"


def test_ocr_failure(tmp_path, photo_path):
    outcome = _service(tmp_path, FailingOCRReader()).process(photo_path)

    assert not outcome.success
    assert outcome.message == "Text recognition failed: model not loaded"
    assert not (tmp_path / "out").exists()


def test_orientation_round_trip(tmp_path):
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[EXIF_ORIENTATION] = 6
    Image.new("RGB", (400, 300), (255, 255, 255)).save(path, format="JPEG", exif=exif)

    reader = DummyOCRReader()
    outcome = _service(tmp_path, reader).process(str(path))

    assert outcome.success
    with Image.open(outcome.saved_path) as img:
        # se procesa derecha (rotada 90º) y se reescribe el tag original
        assert img.size == (300, 400)
        assert img.getexif().get(EXIF_ORIENTATION) == 6


class FailingRedactor(OpenCVRedactor):
    def redact(self, image, plates):
        raise ValueError("bad mask")


def test_save_failure_then_next_image_works(tmp_path, photo_path):
    blocker = tmp_path / "out"
    blocker.write_bytes(b"not a directory")
    service = _service(tmp_path, DummyOCRReader(_ocr_with_plate()))

    failed = service.process(photo_path)

    assert not failed.success
    assert failed.message.startswith("Error saving image: ")
    assert failed.saved_path is None

    blocker.unlink()
    ok = service.process(photo_path)

    assert ok.success
    assert ok.saved_path == tmp_path / "out" / "1-1.jpg"


def test_processing_failure(tmp_path, photo_path):
    service = _service(tmp_path, DummyOCRReader(_ocr_with_plate()))
    service.redactor = FailingRedactor()

    outcome = service.process(photo_path)

    assert not outcome.success
    assert outcome.message == "Error processing image: bad mask"
    assert not (tmp_path / "out").exists()


def test_run_images_logs_outcome(tmp_path, photo_path, caplog):
    service = _service(tmp_path, DummyOCRReader(_ocr_with_plate()))

    with caplog.at_level(logging.DEBUG, logger="src.application.plate_blur_runner"):
        outcomes = run_images(service, [photo_path, str(tmp_path / "missing.jpg")])

    assert [o.success for o in outcomes] == [True, False]

    data = outcomes[0].to_dict()
    assert data["success"] is True
    assert data["saved_path"] == str(tmp_path / "out" / "1-1.jpg")
    assert data["source"] == photo_path
    assert {"text": "ND-123-456", "bbox": (100, 100, 200, 140), "confidence": 0.9} in data["plates"]
    assert outcomes[1].to_dict()["plates"] == []

    logged = [json.loads(r.getMessage()) for r in caplog.records if r.getMessage().startswith("{")]
    assert [d["success"] for d in logged] == [True, False]

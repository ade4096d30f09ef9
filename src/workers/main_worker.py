import warnings
warnings.filterwarnings("ignore")

import logging
import sys

from src.core.config import settings
from src.application.plate_blur_runner import create_plate_blur_service, run_images
from src.monitoring.metrics import start_metrics_server

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    paths = sys.argv[1:] if argv is None else argv
    if not paths:
        print("Usage: python -m src.workers.main_worker <image> [<image> ...]")
        return 2

    if settings.metrics_port:
        start_metrics_server(port=settings.metrics_port)

    service = create_plate_blur_service()
    logger.info(f"🚀 {settings.app_name} iniciado ({len(paths)} imágenes).")

    outcomes = run_images(service, paths)
    failed = sum(1 for o in outcomes if not o.success)
    if failed:
        logger.warning(f"⚠️ {failed} de {len(outcomes)} imágenes fallaron")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv


# ==========================================================
# 1) Cargar .env raíz
# ==========================================================
load_dotenv(".env")
DEPLOY_ENV = os.getenv("DEPLOY_ENV", "prod").lower()

# ==========================================================
# 2) Cargar .env del entorno
# ==========================================================
ENV_PATH = f"DevOps/{DEPLOY_ENV}/.env"
load_dotenv(ENV_PATH, override=True)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        extra="allow"
    )

    # =========================
    #  App
    # =========================
    deploy_env: str = "prod"
    app_name: str = "plate-blur"
    app_env: str = "prod"
    log_level: str = "INFO"

    # =========================
    #  Storage
    # =========================
    output_dir: str = "ProcessedImages"
    lot_number: int = Field(1, ge=1)
    image_start_number: int = Field(1, ge=1)
    jpeg_quality: int = Field(100, ge=1, le=100)

    # =========================
    #  Redacción
    # =========================
    redaction_padding: int = Field(40, ge=0)
    blur_radius: float = Field(60.0, ge=0)
    # BGR
    redaction_color: tuple[int, int, int] = (0, 0, 0)

    # =========================
    #  OCR
    # =========================
    ocr_backend: str = "easyocr"
    ocr_lang: str = "en"
    ocr_gpu: bool = False
    ocr_min_confidence: float = Field(0.0, ge=0.0, le=1.0)
    # hueco vertical máximo (en alturas de línea) para unir líneas en un bloque
    ocr_block_y_ths: float = Field(0.5, ge=0.0)

    # =========================
    #  Monitoring
    # =========================
    metrics_port: int = 0


settings = Settings()

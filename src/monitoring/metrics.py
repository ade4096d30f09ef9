from prometheus_client import Gauge, Counter, start_http_server

# Imágenes procesadas por estado (ok / error)
images_processed_total = Counter(
    "images_processed_total",
    "Total de imágenes procesadas",
    ["status"]
)

# Placas detectadas
plates_detected_total = Counter(
    "plates_detected_total",
    "Total de placas detectadas"
)

# Latencia OCR
ocr_latency = Gauge(
    "ocr_latency_seconds",
    "Tiempo de OCR de la última imagen"
)

# Latencia total pipeline
pipeline_latency = Gauge(
    "pipeline_latency_seconds",
    "Tiempo total de procesamiento de la última imagen"
)

def start_metrics_server(port: int = 9100):
    """Arranca servidor de métricas Prometheus."""
    start_http_server(port)
    print(f"📊 Prometheus metrics disponible en :{port}")

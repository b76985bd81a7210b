"""Spanish display strings for Tesseract recognition status messages."""

STATUS_TRANSLATIONS: dict[str, str] = {
    "loading tesseract core": "Cargando núcleo de Tesseract",
    "initializing tesseract": "Inicializando Tesseract",
    "initialized tesseract": "Tesseract inicializado",
    "loading language traineddata": "Cargando datos de entrenamiento de idioma",
    "loading language traineddata (from cache)": (
        "Cargando datos de entrenamiento de idioma (desde caché)"
    ),
    "loaded language traineddata": "Datos de entrenamiento de idioma cargados",
    "initializing api": "Inicializando API",
    "initialized api": "API inicializada",
    "recognizing text": "Reconociendo texto",
}

RECOGNIZING_TEXT = "recognizing text"
RECOGNITION_COMPLETED = "Reconocimiento de texto completado"


def translate_status(raw_status: str) -> str:
    """Return the display string for raw_status, or raw_status itself if unknown."""
    return STATUS_TRANSLATIONS.get(raw_status, raw_status)

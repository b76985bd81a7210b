"""Per-field help texts for the text solver and the image solver."""

from quiz_solver.presentation.domain.observer import HelpObserver

_MATCH_HELP = (
    "Aquí podrás ver la coincidencia de la base de datos más parecida a la "
    "pregunta que has introducido."
)
_CONFIDENCE_HELP = (
    "Aquí podrás ver el porcentaje de coincidencia de tu búsqueda con la mejor "
    "coincidencia encontrada en la base de datos."
)
_ANSWER_HELP = (
    "Este campo contiene la respuesta a la coincidencia encontrada en la base de "
    "datos.\n\nRecuerda revisar que la coincidencia sea parecida o igual a tu "
    "pregunta original."
)
_EXPLANATION_HELP = (
    "Este campo contiene la explicación de la respuesta, en caso de que exista en "
    "la base de datos."
)

HELP_TEXTS: dict[str, dict[str, str]] = {
    "text-solver": {
        "input": (
            "Aquí deberás escribir la pregunta que quieras resolver. Intenta que sea "
            "lo más parecida posible a las preguntas disponibles en la base de "
            "datos.\n\nCuanta más información contenga la pregunta, mayor será la "
            "probabilidad de obtener un resultado satisfactorio."
        ),
        "match": _MATCH_HELP,
        "confidence": _CONFIDENCE_HELP,
        "answer": _ANSWER_HELP,
        "explanation": _EXPLANATION_HELP,
    },
    "image-solver": {
        "input": (
            "Aquí deberás indicar una imagen de la pregunta que quieras buscar. "
            "Sirven capturas de pantalla e imágenes guardadas.\n\nRecuerda "
            "encuadrar lo máximo posible el texto a buscar, reduciendo así las "
            "posibilidades de falsos reconocimientos."
        ),
        "text": "Este campo contiene el texto escaneado de la imagen.",
        "match": _MATCH_HELP,
        "confidence": _CONFIDENCE_HELP,
        "answer": _ANSWER_HELP,
        "explanation": _EXPLANATION_HELP,
        "tesseract-status": (
            "Este campo contiene el estado actual de reconocimiento de texto de "
            "Tesseract (OCR)."
        ),
        "tesseract-progress": (
            "Este campo contiene el progreso de cada estado de procesamiento de "
            "Tesseract (OCR)."
        ),
    },
}


def field_help(page: str, field: str, observer: HelpObserver) -> str | None:
    """Return the help text for field on page, or None if there is none."""
    fields = HELP_TEXTS.get(page)
    if fields is None:
        observer.help_page_missing(page=page)
        return None

    text = fields.get(field)
    if text is None:
        observer.help_field_missing(page=page, field=field)
    return text

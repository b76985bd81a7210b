"""User-facing strings shared by every rendering of a result."""

MISSING_MESSAGE = "No se ha encontrado ningún resultado viable"

TRUE_LABEL = "Verdadero"
FALSE_LABEL = "Falso"

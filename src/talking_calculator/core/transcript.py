"""
Conversión de frases habladas a expresiones matemáticas.

Las reglas se aplican en orden: primero las palabras numéricas, después
las frases de operadores. El orden importa (una regla posterior ve el texto
ya sustituido por las anteriores), por eso se mantiene como una lista.
"""

import re


NUMBER_WORDS = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty",
]

# ============================================================================
# REGLAS DE NORMALIZACIÓN - (patrón, reemplazo) aplicadas secuencialmente
# ============================================================================
RULES = [
    (re.compile(rf"\b{word}\b"), str(number))
    for number, word in enumerate(NUMBER_WORDS)
] + [
    (re.compile(r"\bplus\b|\badd\b"), " + "),
    (re.compile(r"\bminus\b|\bsubtract\b"), " - "),
    (re.compile(r"\btimes\b|\bmultiply\b|\binto\b"), " * "),
    (re.compile(r"\bdivide\b|\bdivided by\b|\bover\b"), " / "),
    (re.compile(r"\bpoint\b|\bdot\b"), "."),
]

WHITESPACE = re.compile(r"\s+")

# Mensajes para los códigos de error del reconocedor de voz
SPEECH_ERRORS = {
    "no_match": "No speech detected",
    "speech_timeout": "Speech timeout",
}


def normalize_transcript(transcript):
    """
    Convierte una transcripción de voz en una expresión.

    Args:
        transcript (str): Frase reconocida (ej: "Five plus three")

    Returns:
        str: Expresión normalizada (ej: "5 + 3"), vacía si no queda nada

    Nota:
        "two point five" -> "2 . 5"; el editor elimina los espacios antes
        de evaluar, por lo que se calcula como 2.5.
    """
    if not transcript:
        return ""
    text = transcript.lower().strip()
    for pattern, replacement in RULES:
        text = pattern.sub(replacement, text)
    return WHITESPACE.sub(" ", text).strip()


def speech_error_message(code):
    """Retorna el mensaje hablado para un código de error del reconocedor."""
    return SPEECH_ERRORS.get(code, "Speech recognition error")

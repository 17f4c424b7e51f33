"""
Evaluador de expresiones aritméticas.

Este módulo contiene el motor de cálculo de la calculadora parlante:
tokenizador, conversión infija -> postfija (shunting-yard) y evaluación
de la secuencia postfija sobre una pila numérica.

El evaluador no guarda estado y nunca lanza excepciones hacia el llamador:
cualquier fallo se devuelve como un EvaluationResult con tipo de error.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum


# Operadores aceptados (canónicos y glifos de pantalla)
OPERATORS = "+-*/×÷"

DIGITS = "0123456789"

# Un número válido: dígitos con, opcionalmente, una parte decimal
NUMBER_PATTERN = re.compile(r"\d+(\.\d+)?", re.ASCII)

# Redondeo final para eliminar ruido de coma flotante (10 decimales)
ROUNDING_SCALE = 1e10


class EvaluationError(Enum):
    """Tipos de error posibles al evaluar una expresión."""

    MALFORMED = "malformed"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class EvaluationResult:
    """
    Resultado de una evaluación: un valor finito o un tipo de error.

    Atributos:
        value (float): Valor calculado (None si hubo error)
        error (EvaluationError): Tipo de error (None si el cálculo es válido)
    """

    value: float = None
    error: EvaluationError = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)


# Centinela genérico de expresión inválida
INVALID = EvaluationResult.failure(EvaluationError.MALFORMED)


def precedence(op):
    """
    Retorna la precedencia de un operador.

    Returns:
        int: 1 para suma/resta, 2 para multiplicación/división, 0 en otro caso
    """
    if op in ("+", "-"):
        return 1
    if op in ("*", "/", "×", "÷"):
        return 2
    return 0


def is_number(token):
    """Indica si un token es un literal numérico bien formado."""
    return NUMBER_PATTERN.fullmatch(token) is not None


def tokenize(expression):
    """
    Divide una expresión infija en tokens de izquierda a derecha.

    Args:
        expression (str): Expresión (ej: "12.3 + 4")

    Returns:
        list: Tokens en orden (ej: ["12.3", "+", "4"])

    Reglas:
        - Dígitos y '.' consecutivos forman un solo token numérico
          (no se valida aquí: "1.2.3" llega como un único token)
        - Cada operador es un token de un carácter
        - Cualquier otro carácter (espacios, letras, "−" de pantalla,
          dígitos no ASCII) se descarta
    """
    tokens = []
    i = 0
    while i < len(expression):
        char = expression[i]
        if char in DIGITS or char == ".":
            start = i
            while i < len(expression) and (expression[i] in DIGITS or expression[i] == "."):
                i += 1
            tokens.append(expression[start:i])
        elif char in OPERATORS:
            tokens.append(char)
            i += 1
        else:
            i += 1
    return tokens


def to_postfix(tokens):
    """
    Convierte tokens infijos a notación postfija (algoritmo shunting-yard).

    Args:
        tokens (list): Tokens producidos por tokenize()

    Returns:
        list: Tokens en orden polaco inverso

    Asociatividad:
        Se desapilan los operadores de precedencia MAYOR O IGUAL al entrante,
        así todos los operadores asocian por la izquierda ("8-3-2" = 3).
        No hay soporte de paréntesis.
    """
    output = []
    stack = []
    for token in tokens:
        if token[0] in DIGITS or token[0] == ".":
            output.append(token)
        else:
            while stack and precedence(stack[-1]) >= precedence(token):
                output.append(stack.pop())
            stack.append(token)
    while stack:
        output.append(stack.pop())
    return output


def _apply(op, a, b):
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op in ("*", "×"):
        return a * b
    return a / b


def evaluate_postfix(postfix):
    """
    Evalúa una secuencia postfija sobre una pila numérica.

    Args:
        postfix (list): Tokens en orden polaco inverso

    Returns:
        EvaluationResult: Valor redondeado a 10 decimales o error

    Casos especiales:
        - '-' con un solo operando en la pila es menos unario ("-5" -> -5)
        - Cualquier otro operador con un solo operando es inválido
        - División entre 0.0 -> DIVISION_BY_ZERO (nunca infinito)
        - Resultado intermedio NaN o infinito -> OVERFLOW
        - Pila vacía al final -> 0
    """
    stack = []
    for token in postfix:
        if token[0] in DIGITS or token[0] == ".":
            if not is_number(token):
                return INVALID
            stack.append(float(token))
            continue

        if not stack:
            return INVALID
        b = stack.pop()

        if not stack:
            if token == "-":
                stack.append(-b)
                continue
            return INVALID

        a = stack.pop()
        if token in ("/", "÷") and b == 0.0:
            return EvaluationResult.failure(EvaluationError.DIVISION_BY_ZERO)

        result = _apply(token, a, b)
        if math.isnan(result) or math.isinf(result):
            return EvaluationResult.failure(EvaluationError.OVERFLOW)
        stack.append(result)

    if not stack:
        return EvaluationResult.success(0.0)

    scaled = stack.pop() * ROUNDING_SCALE
    if math.isinf(scaled):
        return EvaluationResult.failure(EvaluationError.OVERFLOW)
    return EvaluationResult.success(round(scaled) / ROUNDING_SCALE)


def evaluate(expression):
    """
    Evalúa una expresión infija completa.

    Args:
        expression (str): Expresión con operadores canónicos o de pantalla

    Returns:
        EvaluationResult: Nunca lanza excepciones

    Ejemplos:
        evaluate("2+3*4").value  -> 14.0
        evaluate("")             -> 0.0 (expresión vacía no es error)
        evaluate("5/0").error    -> EvaluationError.DIVISION_BY_ZERO
    """
    if not expression or not expression.strip():
        return EvaluationResult.success(0.0)
    try:
        tokens = tokenize(expression)
        if not tokens:
            return EvaluationResult.success(0.0)
        return evaluate_postfix(to_postfix(tokens))
    except Exception:
        return INVALID


def format_result(value):
    """
    Formatea un resultado para mostrarlo y pronunciarlo.

    Returns:
        str: Entero sin ".0" si el valor es entero; si no, hasta 10
             decimales sin ceros finales (ej: 16.3 -> "16.3")
    """
    if value % 1.0 == 0:
        return str(int(value))
    return f"{value:.10f}".rstrip("0").rstrip(".")

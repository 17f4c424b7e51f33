"""
Máquina de estados del editor de entrada.

Este módulo construye la expresión carácter a carácter a partir de
pulsaciones de botones y transcripciones de voz. La transición es una
función pura: apply(estado, comando) -> (nuevo estado, efectos). Los efectos
(hablar, vibrar, actualizar pantalla, guardar historial) los ejecuta la
sesión que rodea al editor.
"""

from dataclasses import dataclass, replace

from .evaluator import evaluate, format_result
from .transcript import normalize_transcript, speech_error_message


# Operador canónico -> glifo de pantalla
DISPLAY_SYMBOLS = {"+": "+", "-": "−", "*": "×", "/": "÷"}

# Glifo de pantalla -> operador canónico (usado al evaluar)
CANONICAL_SYMBOLS = {"×": "*", "÷": "/", "−": "-"}

OPERATOR_NAMES = {"+": "plus", "-": "minus", "*": "multiply", "/": "divide"}

# Nombre hablado de cada carácter borrable
CHAR_NAMES = {
    "0": "zero", "1": "one", "2": "two", "3": "three", "4": "four",
    "5": "five", "6": "six", "7": "seven", "8": "eight", "9": "nine",
    ".": "decimal point", "+": "plus", "−": "minus", "×": "multiply", "÷": "divide",
}

OPERATOR_GLYPHS = ("+", "−", "×", "÷")


# ============================================================================
# ESTADO DEL EDITOR
# ============================================================================
@dataclass(frozen=True)
class EditorState:
    """
    Estado inmutable de una sesión de calculadora.

    Atributos:
        expression: Texto infijo visible (ej: "12.3 + 4")
        current_number: Número que se está escribiendo (ej: "4")
        just_calculated: True justo después de un "=" válido
        last_expression_before_equals: Expresión guardada al pulsar "="
        error: La pantalla muestra "Error" tras un "=" inválido
    """

    expression: str = ""
    current_number: str = ""
    just_calculated: bool = False
    last_expression_before_equals: str = ""
    error: bool = False

    @property
    def display(self):
        if self.error:
            return "Error"
        return self.expression if self.expression else "0"


# ============================================================================
# COMANDOS
# ============================================================================
@dataclass(frozen=True)
class Digit:
    digit: str


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Operator:
    op: str


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class VoiceInput:
    transcript: str


@dataclass(frozen=True)
class VoiceError:
    code: str


# ============================================================================
# EFECTOS - instrucciones que ejecuta la capa que rodea al editor
# ============================================================================
@dataclass(frozen=True)
class Speak:
    text: str


@dataclass(frozen=True)
class Vibrate:
    pass


@dataclass(frozen=True)
class UpdateDisplay:
    text: str


@dataclass(frozen=True)
class RecordHistory:
    entry: str


@dataclass(frozen=True)
class Notify:
    message: str


# ============================================================================
# TRANSICIONES
# ============================================================================
def _digit(state, command, learning_mode):
    digit = str(command.digit)
    if len(digit) != 1 or digit not in "0123456789":
        return state, []
    state = replace(
        state,
        expression=state.expression + digit,
        current_number=state.current_number + digit,
        just_calculated=False,
    )
    return state, [Speak(digit)]


def _decimal(state, command, learning_mode):
    if "." in state.current_number:
        return state, []
    state = replace(
        state,
        expression=state.expression + ".",
        current_number=state.current_number + ".",
        just_calculated=False,
    )
    return state, [Speak("decimal")]


def _operator(state, command, learning_mode):
    op = CANONICAL_SYMBOLS.get(command.op, command.op)
    if op not in DISPLAY_SYMBOLS:
        return state, []
    # No se aceptan dos operadores seguidos ni un operador inicial
    if not state.expression or state.expression.endswith(" "):
        return state, []
    state = replace(
        state,
        expression=f"{state.expression} {DISPLAY_SYMBOLS[op]} ",
        current_number="",
        just_calculated=False,
    )
    return state, [Speak(OPERATOR_NAMES[op])]


def _splice_current_number(state, new_number):
    """Sustituye la última aparición de current_number en la expresión."""
    idx = state.expression.rfind(state.current_number)
    if idx < 0:
        return None
    expression = (
        state.expression[:idx]
        + new_number
        + state.expression[idx + len(state.current_number):]
    )
    return replace(
        state,
        expression=expression,
        current_number=new_number,
        just_calculated=False,
    )


def _percent(state, command, learning_mode):
    if not state.current_number:
        return state, []
    try:
        value = float(state.current_number)
    except ValueError:
        return state, []
    new_state = _splice_current_number(state, format_result(value / 100.0))
    if new_state is None:
        return state, []
    return new_state, [Speak("percent")]


def _toggle_sign(state, command, learning_mode):
    number = state.current_number
    if not number:
        return state, []
    negative = number.startswith("-")
    new_state = _splice_current_number(state, number[1:] if negative else "-" + number)
    if new_state is None:
        return state, []
    return new_state, [Speak("positive" if negative else "negative")]


def _backspace(state, command, learning_mode):
    # Primer borrado tras "=": recupera la expresión anterior y nada más
    if state.just_calculated:
        if state.last_expression_before_equals:
            state = replace(
                state,
                expression=state.last_expression_before_equals,
                current_number="",
                just_calculated=False,
            )
            return state, [Speak("restored")]
        state = replace(state, just_calculated=False)

    if not state.expression:
        return state, []

    expression = state.expression.rstrip(" ")
    if expression.endswith(OPERATOR_GLYPHS):
        deleted = expression[-1]
        expression = expression[:-1].rstrip(" ")
    else:
        deleted = expression[-1]
        expression = expression[:-1]

    # current_number pierde su último carácter aunque lo borrado fuera un operador
    state = replace(
        state,
        expression=expression,
        current_number=state.current_number[:-1],
    )
    name = CHAR_NAMES.get(deleted, deleted).strip()
    return state, [Speak(f"deleted {name}" if name else "deleted")]


def _clear(state, command, learning_mode):
    return EditorState(), [Speak("cleared")]


def _equals(state, command, learning_mode):
    if not state.expression:
        return state, []

    snapshot = state.expression
    normalized = snapshot
    for glyph, op in CANONICAL_SYMBOLS.items():
        normalized = normalized.replace(glyph, op)
    normalized = normalized.replace(" ", "")

    result = evaluate(normalized)
    if not result.ok:
        # La expresión se conserva: el siguiente borrado la restaura tal cual
        state = replace(
            state,
            last_expression_before_equals=snapshot,
            just_calculated=True,
            error=True,
        )
        return state, [Speak("Invalid expression"), Notify("Invalid expression")]

    formatted = format_result(result.value)
    if learning_mode:
        message = f"Let me solve {normalized} step by step. The result is {formatted}"
    else:
        message = f"Result is {formatted}"

    original = snapshot if snapshot.strip() else normalized
    state = EditorState(
        expression=formatted,
        current_number=formatted,
        just_calculated=True,
        last_expression_before_equals=snapshot,
    )
    return state, [Speak(message), RecordHistory(f"{original} = {formatted}")]


def _voice_input(state, command, learning_mode):
    normalized = normalize_transcript(command.transcript)
    if not normalized:
        return state, [Speak("No speech detected"), Notify("No speech detected")]
    state = replace(state, expression=normalized, current_number="")
    new_state, effects = _equals(state, Equals(), learning_mode)
    return new_state, [Notify(f"Heard: {command.transcript}")] + effects


def _voice_error(state, command, learning_mode):
    message = speech_error_message(command.code)
    return state, [Speak(message), Notify(message)]


HANDLERS = {
    Digit: _digit,
    DecimalPoint: _decimal,
    Operator: _operator,
    Percent: _percent,
    ToggleSign: _toggle_sign,
    Backspace: _backspace,
    Clear: _clear,
    Equals: _equals,
    VoiceInput: _voice_input,
    VoiceError: _voice_error,
}

# Comandos que no vienen de un botón (no producen vibración)
VOICE_COMMANDS = (VoiceInput, VoiceError)


def apply(state, command, learning_mode=False):
    """
    Aplica un comando de edición al estado.

    Args:
        state (EditorState): Estado actual
        command: Digit, DecimalPoint, Operator, Percent, ToggleSign, Backspace,
                 Clear, Equals, VoiceInput o VoiceError
        learning_mode (bool): Explicación hablada más larga al calcular

    Returns:
        tuple: (EditorState, list de efectos)

    Los comandos inválidos para el estado actual (operador sin expresión,
    segundo punto decimal, porcentaje sin número...) no cambian nada y no
    se consideran errores. Cada pulsación de botón produce Vibrate.

    Raises:
        TypeError: Si el comando no es de un tipo conocido
    """
    handler = HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Comando desconocido: {command!r}")

    effects = [] if isinstance(command, VOICE_COMMANDS) else [Vibrate()]

    # Cualquier comando nuevo saca la pantalla del estado "Error"
    cleared = replace(state, error=False) if state.error else state
    new_state, handler_effects = handler(cleared, command, learning_mode)

    if new_state != state:
        effects.append(UpdateDisplay(new_state.display))
    return new_state, effects + handler_effects


# Símbolo de botón -> comando
SYMBOL_COMMANDS = {
    "=": Equals(),
    "C": Clear(),
    ".": DecimalPoint(),
    "%": Percent(),
    "BACKSPACE": Backspace(),
    "SIGN": ToggleSign(),
    "+": Operator("+"),
    "-": Operator("-"),
    "−": Operator("-"),
    "*": Operator("*"),
    "×": Operator("*"),
    "/": Operator("/"),
    "÷": Operator("/"),
}


def command_for_symbol(symbol):
    """
    Traduce el símbolo de un botón a su comando.

    Returns:
        Comando correspondiente, o None si el símbolo no es un botón
    """
    if len(symbol) == 1 and symbol.isdigit():
        return Digit(symbol)
    return SYMBOL_COMMANDS.get(symbol)

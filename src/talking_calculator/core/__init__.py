"""
Módulo core con la lógica principal de la calculadora.
Contiene el evaluador de expresiones, el editor de entrada y el historial.
"""

from .evaluator import evaluate, format_result, EvaluationResult, EvaluationError
from .editor import EditorState, apply, command_for_symbol
from .history import HistoryLog, PreferenceHistoryStore
from .transcript import normalize_transcript

__all__ = [
    'evaluate', 'format_result', 'EvaluationResult', 'EvaluationError',
    'EditorState', 'apply', 'command_for_symbol',
    'HistoryLog', 'PreferenceHistoryStore',
    'normalize_transcript',
]

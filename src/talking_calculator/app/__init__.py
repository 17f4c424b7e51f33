"""
Módulo de la aplicación principal.
Contiene la sesión que integra todos los componentes.
"""

from .calculator_app import TalkingCalculatorApp

__all__ = ['TalkingCalculatorApp']

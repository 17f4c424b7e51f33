"""
Calculadora parlante accesible.

Evaluador de expresiones, editor de entrada por botones y voz, e historial
de cálculos, con feedback hablado (pyttsx3) y háptico.
"""

__version__ = "1.0.0"

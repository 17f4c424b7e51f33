"""
Módulo de interfaz de usuario.
Contiene el renderizador de consola y el feedback háptico.
"""

from .console import ConsoleRenderer
from .haptics import HapticFeedback

__all__ = ['ConsoleRenderer', 'HapticFeedback']

"""
Módulo de configuración para la calculadora parlante.
Contiene la configuración de accesibilidad y el almacén de preferencias.
"""

from .accessibility import AccessibilityConfig
from .preferences import JsonPreferenceStore

__all__ = ['AccessibilityConfig', 'JsonPreferenceStore']

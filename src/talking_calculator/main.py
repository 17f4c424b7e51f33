"""
Punto de entrada de la calculadora parlante.

Ejecución:
    talking-calculator
    python -m talking_calculator.main
"""

from .app.calculator_app import TalkingCalculatorApp
from .config.accessibility import AccessibilityConfig
from .config.preferences import JsonPreferenceStore
from .core.history import HistoryLog, PreferenceHistoryStore


def build_app(config=None):
    """
    Crea la sesión con preferencias e historial persistidos.

    Args:
        config (AccessibilityConfig): Configuración base (opcional)

    Returns:
        TalkingCalculatorApp: Aplicación lista para run()
    """
    config = config if config else AccessibilityConfig()
    preferences = JsonPreferenceStore(config.preferences_path)
    config.load_preferences(preferences)
    history = HistoryLog(PreferenceHistoryStore(preferences), capacity=config.history_limit)
    return TalkingCalculatorApp(config=config, history=history, preferences=preferences)


def main():
    """
    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y el traceback
    """
    try:
        app = build_app()
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

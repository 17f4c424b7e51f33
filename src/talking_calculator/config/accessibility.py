"""
Configuración de opciones de accesibilidad para usuarios.

Este módulo contiene la configuración centralizada de la calculadora
parlante: voz, vibración, modo aprendizaje e historial.
"""

import os


# Límites del multiplicador de velocidad de voz
MIN_SPEECH_SPEED = 0.5
MAX_SPEECH_SPEED = 2.0

DEFAULT_PREFERENCES_PATH = os.path.join("~", ".talking_calculator.json")


# ============================================================================
# CLASE: AccessibilityConfig
# Propósito: Configuración de opciones de accesibilidad para usuarios
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad)
#   - Activar/desactivar vibración y modo aprendizaje
#   - Leer y guardar las preferencias del usuario
# ============================================================================
class AccessibilityConfig:
    """
    Configuración de accesibilidad de la calculadora parlante.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad)
        - Vibración en cada pulsación
        - Modo aprendizaje (explica el cálculo al dar el resultado)
    """

    # Preferencias que se guardan entre sesiones
    PERSISTED = ("voice_enabled", "haptic_enabled", "learning_mode", "speech_speed")

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad base (palabras por minuto)
        self.speech_speed = 1.0             # Multiplicador de velocidad (0.5-2.0)

        # ====================================================================
        # INTERACCIÓN
        # ====================================================================
        self.haptic_enabled = True          # Vibración en cada pulsación
        self.learning_mode = True           # Explicar el cálculo al dar el resultado

        # ====================================================================
        # HISTORIAL
        # ====================================================================
        self.history_limit = 50
        self.preferences_path = DEFAULT_PREFERENCES_PATH

    def set_speech_speed(self, speed):
        """Ajusta el multiplicador de velocidad dentro de 0.5-2.0."""
        self.speech_speed = min(max(float(speed), MIN_SPEECH_SPEED), MAX_SPEECH_SPEED)

    def get_speech_rate(self):
        """Retorna la velocidad efectiva en palabras por minuto."""
        return int(self.voice_rate * self.speech_speed)

    def load_preferences(self, store):
        """
        Carga las preferencias guardadas.

        Args:
            store (JsonPreferenceStore): Almacén de preferencias

        Los valores ausentes conservan el valor por defecto.
        """
        self.voice_enabled = bool(store.get("voice_enabled", self.voice_enabled))
        self.haptic_enabled = bool(store.get("haptic_enabled", self.haptic_enabled))
        self.learning_mode = bool(store.get("learning_mode", self.learning_mode))
        try:
            self.set_speech_speed(store.get("speech_speed", self.speech_speed))
        except (TypeError, ValueError):
            print("⚠ Velocidad de voz guardada no válida, se usa la predeterminada")

    def save_preferences(self, store):
        for name in self.PERSISTED:
            store.set(name, getattr(self, name))

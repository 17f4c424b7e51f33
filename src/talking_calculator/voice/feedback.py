"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para feedback auditivo,
ejecutándose de forma asíncrona para no bloquear la calculadora.
"""

import threading
import pyttsx3
from collections import deque


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Pronunciar los mensajes que produce el editor
#   - Ejecutar en hilo separado para no bloquear la calculadora
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Colaborador de salida de voz (speak) basado en pyttsx3.

    Características:
        - Ejecución asíncrona: speak() retorna inmediatamente
        - Cola de mensajes (máximo 5 pendientes, se descartan los más viejos)
        - Volumen y velocidad tomados de AccessibilityConfig
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad

        Si el motor no se puede inicializar, la voz queda desactivada y la
        calculadora sigue funcionando en silencio.
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        try:
            self.engine = pyttsx3.init()
            self.apply_settings()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    def apply_settings(self):
        """Aplica volumen y velocidad actuales de la configuración al motor."""
        if not self.engine:
            return
        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.get_speech_rate())
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine or not text:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def stop(self):
        """Descarta los mensajes pendientes y detiene la voz actual."""
        with self._lock:
            self.message_queue.clear()
        if self.engine:
            try:
                self.engine.stop()
            except Exception as e:
                print(f"⚠ Error al detener voz: {e}")

"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase TalkingCalculatorApp: la sesión de
calculadora que posee el estado del editor y ejecuta sus efectos.
"""

from ..core import editor
from ..core.editor import EditorState, VoiceError, VoiceInput, command_for_symbol
from ..core.history import HistoryLog, PreferenceHistoryStore
from ..config.accessibility import AccessibilityConfig
from ..ui.console import ConsoleRenderer
from ..ui.haptics import HapticFeedback
from ..voice.feedback import VoiceFeedback


# Teclas de consola -> símbolo de botón
KEY_SYMBOLS = {
    "x": "*",
    "%": "%",
    "n": "SIGN",
    "b": "BACKSPACE",
    "c": "C",
}

VOICE_PREFIX = "say"


# ============================================================================
class TalkingCalculatorApp:
    """
    Sesión de calculadora parlante.

    Arquitectura:
        - core.editor: Transiciones puras del estado de edición
        - HistoryLog: Historial acotado y persistente
        - VoiceFeedback: Colaborador de voz (speak)
        - HapticFeedback: Colaborador de vibración (vibrate)
        - ConsoleRenderer: Muestra pantalla, avisos e historial
        - TalkingCalculatorApp: Coordinador y bucle principal

    Cada comando se procesa por completo antes de aceptar el siguiente.
    """

    def __init__(self, config=None, voice=None, haptics=None, history=None,
                 renderer=None, preferences=None):
        """
        Inicializa la sesión y sus colaboradores.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad (opcional)
            voice: Objeto con speak(text); por defecto VoiceFeedback (pyttsx3)
            haptics: Objeto con vibrate(); por defecto HapticFeedback
            history (HistoryLog): Historial; por defecto persistido en preferences
            renderer (ConsoleRenderer): Salida de texto (opcional)
            preferences (JsonPreferenceStore): Almacén de preferencias (opcional)
        """
        self.config = config if config else AccessibilityConfig()
        self.preferences = preferences

        self.voice = voice if voice else VoiceFeedback(self.config)
        self.haptics = haptics if haptics else HapticFeedback(self.config)
        self.renderer = renderer if renderer else ConsoleRenderer()

        if history is None:
            store = PreferenceHistoryStore(self.preferences) if self.preferences is not None else None
            history = HistoryLog(store, capacity=self.config.history_limit)
        self.history = history

        self.state = EditorState()

    def handle(self, command):
        """
        Aplica un comando al editor y ejecuta sus efectos en orden.

        Returns:
            list: Efectos producidos (útil para tests y para la interfaz)
        """
        self.state, effects = editor.apply(self.state, command, self.config.learning_mode)
        for effect in effects:
            self._execute(effect)
        return effects

    def _execute(self, effect):
        if isinstance(effect, editor.Speak):
            self.voice.speak(effect.text)
        elif isinstance(effect, editor.Vibrate):
            self.haptics.vibrate()
        elif isinstance(effect, editor.UpdateDisplay):
            self.renderer.update_display(effect.text)
        elif isinstance(effect, editor.RecordHistory):
            self.history.add_entry(effect.entry)
        elif isinstance(effect, editor.Notify):
            self.renderer.show_feedback(effect.message)

    def handle_key(self, key):
        """
        Procesa una tecla de consola.

        Args:
            key (str): Dígito, operador (+ - * / x), '.', '%', '=',
                       'n' (cambiar signo), 'b' (borrar), 'c' (borrar todo)

        Returns:
            list: Efectos, o None si la tecla no es un botón
        """
        command = command_for_symbol(KEY_SYMBOLS.get(key, key))
        if command is None:
            return None
        return self.handle(command)

    def handle_transcript(self, transcript):
        """
        Entrega una transcripción del reconocedor de voz.

        Una transcripción vacía se trata como "no se detectó voz".
        """
        if transcript is None or not transcript.strip():
            return self.handle(VoiceError("no_match"))
        return self.handle(VoiceInput(transcript))

    def handle_line(self, line):
        """
        Procesa una línea de la consola.

        Returns:
            bool: False si el usuario pidió salir
        """
        text = line.strip()
        lowered = text.lower()

        if lowered == "q":
            return False
        if lowered == "h":
            self.renderer.show_history(self.history.get_all())
        elif lowered == "hc":
            self.history.clear()
            self.renderer.show_feedback("Historial borrado")
            self.voice.speak("history cleared")
        elif lowered == "v":
            self.toggle_voice()
        elif lowered == "t":
            self.toggle_haptics()
        elif lowered == "l":
            self.toggle_learning_mode()
        elif lowered == VOICE_PREFIX or lowered.startswith(VOICE_PREFIX + " "):
            self.handle_transcript(text[len(VOICE_PREFIX):].strip())
        else:
            # Varias teclas en una línea: "12+3=" equivale a pulsarlas en orden
            for key in lowered.replace(" ", ""):
                if self.handle_key(key) is None:
                    self.renderer.show_feedback(f"Tecla desconocida: {key}")
        return True

    def toggle_voice(self):
        if self.config.voice_enabled:
            # Decir "voice off" antes de apagarse
            self.voice.speak("voice off")
            self.config.voice_enabled = False
        else:
            self.config.voice_enabled = True
            self.voice.speak("voice on")
        status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
        print(f"🔊 Voz: {status}")
        self._save_preferences()

    def toggle_haptics(self):
        self.config.haptic_enabled = not self.config.haptic_enabled
        status = "ACTIVADA" if self.config.haptic_enabled else "DESACTIVADA"
        print(f"📳 Vibración: {status}")
        self._save_preferences()

    def toggle_learning_mode(self):
        self.config.learning_mode = not self.config.learning_mode
        status = "ACTIVADO" if self.config.learning_mode else "DESACTIVADO"
        print(f"🎓 Modo aprendizaje: {status}")
        self.voice.speak("learning mode on" if self.config.learning_mode else "learning mode off")
        self._save_preferences()

    def _save_preferences(self):
        if self.preferences is None:
            return
        try:
            self.config.save_preferences(self.preferences)
        except OSError as e:
            print(f"⚠ No se pudieron guardar las preferencias: {e}")

    def run(self, read_line=input):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Leer una línea de teclado
            2. Traducirla a comandos del editor o de la aplicación
            3. Ejecutar efectos (voz, vibración, pantalla, historial)
            4. Repetir hasta 'q' o fin de entrada
        """
        print("\n" + "="*70)
        print("CALCULADORA PARLANTE")
        print("="*70)
        print("\nNúmeros: 0-9   Decimal: .   Operaciones: + - * /")
        print("Igual: =   Porcentaje: %   Signo: n   Borrar: b   Borrar todo: c")
        print("Voz: say <frase>   (ej: say five plus three)")

        if self.config.voice_enabled:
            print("\n🔊 FEEDBACK POR VOZ: Activado")
        if self.config.haptic_enabled:
            print("📳 VIBRACIÓN: Activada")
        if self.config.learning_mode:
            print("🎓 MODO APRENDIZAJE: Activado")

        print("\nh: historial | hc: borrar historial | v: voz | t: vibración | l: aprendizaje")
        print("q: salir")
        print("="*70 + "\n")

        self.voice.speak("Talking calculator ready")
        self.renderer.update_display(self.state.display)

        while True:
            try:
                line = read_line("> ")
            except EOFError:
                break
            if not self.handle_line(line):
                break

        print("\nOK Aplicacion cerrada correctamente")

"""
Interfaz de consola.

Este módulo contiene la clase ConsoleRenderer que muestra el estado de la
calculadora como texto plano.
"""


# ============================================================================
class ConsoleRenderer:
    """
    Renderizador en modo texto para la calculadora parlante.

    Componentes:
        1. Display principal: expresión en curso, resultado o "Error"
        2. Feedback: avisos temporales (ej: "Heard: five plus three")
        3. Historial: lista numerada de cálculos
    """

    def __init__(self, output=print):
        """
        Args:
            output (callable): Función que escribe una línea (print por defecto)
        """
        self.output = output
        self.display = "0"
        self.feedback_msg = ""

    def update_display(self, text):
        self.display = text
        self.output(f"[ {text} ]")

    def show_feedback(self, msg):
        self.feedback_msg = msg
        self.output(f"» {msg}")

    def show_history(self, entries):
        """Muestra el historial, el cálculo más reciente primero."""
        if not entries:
            self.output("(historial vacío)")
            return
        for i, entry in enumerate(entries, 1):
            self.output(f"{i:2d}. {entry}")

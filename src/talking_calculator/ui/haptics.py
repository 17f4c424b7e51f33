"""
Feedback háptico.

En escritorio no hay motor de vibración: cada pulsación se confirma con la
campana del terminal.
"""

import sys


class HapticFeedback:
    """Colaborador de vibración (vibrate) que respeta haptic_enabled."""

    def __init__(self, config, stream=None):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout

    def vibrate(self):
        if not self.config.haptic_enabled:
            return
        self.stream.write("\a")
        self.stream.flush()

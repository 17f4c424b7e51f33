"""
Almacén de preferencias persistentes en un fichero JSON.

Equivalente de escritorio a las preferencias compartidas del móvil: un
diccionario clave -> valor que se reescribe completo en cada cambio.
"""

import json
import os


class JsonPreferenceStore:
    """
    Preferencias clave/valor guardadas en un fichero JSON.

    Si el fichero no existe se empieza vacío; si está corrupto se avisa
    por consola y también se empieza vacío.
    """

    def __init__(self, path):
        self.path = os.path.expanduser(path)
        self.values = self._read()

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"⚠ Preferencias ilegibles en {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            print(f"⚠ Formato de preferencias inesperado en {self.path}")
            return {}
        return data

    def _write(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.values, f, ensure_ascii=False, indent=2)

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value
        self._write()

    def remove(self, key):
        if key in self.values:
            del self.values[key]
            self._write()

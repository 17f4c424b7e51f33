"""
Historial de cálculos.

Lista acotada de entradas "expresión = resultado", la más reciente primero.
El almacenamiento persistente es un colaborador externo con load()/save().
"""

import threading


MAX_HISTORY_ENTRIES = 50

# Separador de entradas en el formato persistido
DELIMITER = "|||"


def serialize(entries):
    """Une las entradas en una sola cadena delimitada."""
    return DELIMITER.join(entries)


def deserialize(text):
    """
    Separa una cadena delimitada en entradas.

    Returns:
        list: Entradas en orden; lista vacía si la cadena está vacía
    """
    if not text:
        return []
    return text.split(DELIMITER)


# ============================================================================
# CLASE: HistoryLog
# Propósito: Registro acotado de cálculos realizados
# Responsabilidades:
#   - Insertar entradas al principio y descartar la más antigua
#   - Leer y escribir a través del colaborador de persistencia
#   - Serializar lecturas y escrituras con un lock
# ============================================================================
class HistoryLog:
    """
    Historial acotado de cálculos (más reciente primero).

    Concurrencia:
        Añadir, descartar, limpiar y leer se hacen bajo un mismo lock, de
        modo que un guardado en segundo plano nunca ve un estado a medias.
    """

    def __init__(self, store=None, capacity=MAX_HISTORY_ENTRIES):
        """
        Args:
            store: Colaborador con load() -> list y save(list) (opcional)
            capacity (int): Número máximo de entradas
        """
        self.store = store
        self.capacity = capacity
        self._lock = threading.Lock()
        self._entries = []
        if store is not None:
            self._entries = list(store.load())[:capacity]

    def add_entry(self, entry):
        """Añade una entrada al principio, descartando la más antigua si sobra."""
        with self._lock:
            self._entries.insert(0, entry)
            if len(self._entries) > self.capacity:
                self._entries.pop()
            self._save()

    def get_all(self):
        """Retorna una copia de las entradas, la más reciente primero."""
        with self._lock:
            return list(self._entries)

    def clear(self):
        with self._lock:
            self._entries = []
            self._save()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def _save(self):
        if self.store is None:
            return
        try:
            self.store.save(list(self._entries))
        except OSError as e:
            print(f"⚠ No se pudo guardar el historial: {e}")


class PreferenceHistoryStore:
    """
    Adaptador load()/save() sobre una clave del almacén de preferencias.

    El historial se guarda como una única cadena con DELIMITER entre entradas.
    """

    KEY = "calc_history"

    def __init__(self, preferences):
        self.preferences = preferences

    def load(self):
        return deserialize(self.preferences.get(self.KEY, ""))

    def save(self, entries):
        if entries:
            self.preferences.set(self.KEY, serialize(entries))
        else:
            self.preferences.remove(self.KEY)

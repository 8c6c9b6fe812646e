# app/infrastructure/cache/in_memory_page_cache.py
import logging
import threading
from typing import Any, Dict, Optional

from app.domain.ports.page_cache import PageCache


class InMemoryPageCache(PageCache):
    """
    Caché de vistas en memoria del proceso. Revalidar una ruta descarta su
    contenido; la próxima lectura lo recalcula.
    Vive en un solo proceso: con varios workers de uvicorn, cada uno tiene su
    propia copia y solo se invalida la del worker que atendió el POST.
    FastAPI ejecuta los endpoints síncronos en un pool de hilos, por eso el lock.
    """
    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, payload: Any) -> None:
        with self._lock:
            self._entries[path] = payload

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)
        logging.info(f"Caché de '{path}' marcada como obsoleta.")

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._entries


page_cache = InMemoryPageCache()

# app/domain/ports/page_cache.py
from abc import ABC, abstractmethod
from typing import Any, Optional


class PageCache(ABC):
    """Puerto para la caché de vistas renderizadas, indexada por ruta."""

    @abstractmethod
    def get(self, path: str) -> Optional[Any]:
        """Retorna el contenido vigente de la ruta, o None si no existe o está obsoleto."""
        pass

    @abstractmethod
    def set(self, path: str, payload: Any) -> None:
        pass

    @abstractmethod
    def revalidate_path(self, path: str) -> None:
        """
        Marca la vista como obsoleta; la próxima lectura debe volver a
        consultar los datos actuales.
        """
        pass

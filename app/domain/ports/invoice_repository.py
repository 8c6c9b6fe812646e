# app/domain/ports/invoice_repository.py
from abc import ABC, abstractmethod
from typing import List, Dict, Any


class InvoiceRepository(ABC):
    """
    Contrato que define las operaciones sobre la tabla 'invoices'.
    """

    @abstractmethod
    def insert_invoice(self, customer_id: str, amount: int, status: str, date: str) -> str:
        """
        Inserta una nueva factura. `amount` está en centavos y `date` en formato YYYY-MM-DD.
        Retorna el ID generado por el servidor.
        """
        pass

    @abstractmethod
    def list_invoices(self) -> List[Dict[str, Any]]:
        """Retorna las facturas para el listado, las más recientes primero."""
        pass

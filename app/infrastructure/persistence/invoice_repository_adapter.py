# app/infrastructure/persistence/invoice_repository_adapter.py
import uuid
from typing import List, Dict, Any

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import InvoicePersistenceError
from app.domain.ports.invoice_repository import InvoiceRepository
from .models import InvoiceRecord


class SQLInvoiceRepository(InvoiceRepository):
    def __init__(self, db: Session):
        self.db = db

    def insert_invoice(self, customer_id: str, amount: int, status: str, date: str) -> str:
        """
        Ejecuta un único INSERT parametrizado y confirma la transacción.
        Cualquier error de SQLAlchemy deja la sesión limpia (rollback) y se
        relanza como InvoicePersistenceError.
        """
        invoice_id = str(uuid.uuid4())
        stmt = insert(InvoiceRecord).values(
            id=invoice_id,
            customer_id=customer_id,
            amount=amount,
            status=status,
            date=date
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InvoicePersistenceError(str(e)) from e
        return invoice_id

    def list_invoices(self) -> List[Dict[str, Any]]:
        stmt = select(InvoiceRecord).order_by(InvoiceRecord.date.desc(), InvoiceRecord.id)
        return [
            {
                "id": row.id,
                "customer_id": row.customer_id,
                "amount": row.amount,
                "status": row.status,
                "date": row.date,
            }
            for row in self.db.scalars(stmt)
        ]

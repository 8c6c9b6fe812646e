# app/infrastructure/persistence/models.py
from sqlalchemy import Column, Integer, String

from .database import Base


class InvoiceRecord(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True)
    customer_id = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)  # en centavos
    status = Column(String(16), nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD

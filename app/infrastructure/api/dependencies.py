# app/infrastructure/api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.use_cases.create_invoice import CreateInvoiceUseCase
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache
from app.infrastructure.cache.in_memory_page_cache import page_cache
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.invoice_repository_adapter import SQLInvoiceRepository


def get_invoice_repository(db: Session = Depends(get_db)) -> InvoiceRepository:
    return SQLInvoiceRepository(db)


def get_page_cache() -> PageCache:
    return page_cache


def get_create_invoice_use_case(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    cache: PageCache = Depends(get_page_cache)
) -> CreateInvoiceUseCase:
    return CreateInvoiceUseCase(invoice_repo=invoice_repo, page_cache=cache)

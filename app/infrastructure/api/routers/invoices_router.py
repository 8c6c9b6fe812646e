# app/infrastructure/api/routers/invoices_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse

import config
from app.application.use_cases.create_invoice import CreateInvoiceUseCase
from app.domain.models.form_state import FormState, InvoiceCreated, InvoiceValidationFailed
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache
from app.infrastructure.api.dependencies import (
    get_create_invoice_use_case,
    get_invoice_repository,
    get_page_cache,
)

router = APIRouter(prefix=config.INVOICES_PATH, tags=["Invoices"])


@router.post("/create", summary="Crear una nueva factura desde el formulario")
def create_invoice(
    customerId: Optional[str] = Form(None, description="ID del cliente."),
    amount: Optional[str] = Form(None, description="Monto en la unidad mayor (ej. 19.99)."),
    status: Optional[str] = Form(None, description="Estado de la factura: 'pending' o 'paid'."),
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case)
):
    """
    Valida el formulario y guarda la factura. Si todo sale bien redirige
    (303) al listado; si no, retorna el estado del formulario con los errores.
    """
    form = {"customerId": customerId, "amount": amount, "status": status}
    result = use_case.execute(FormState(), form)

    if isinstance(result, InvoiceCreated):
        return RedirectResponse(url=result.redirect_to, status_code=303)

    status_code = 422 if isinstance(result, InvoiceValidationFailed) else 500
    return JSONResponse(status_code=status_code, content=result.state.model_dump(exclude_none=True))


@router.get("", summary="Listado de facturas")
def list_invoices(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    cache: PageCache = Depends(get_page_cache)
):
    """Sirve el listado desde la caché; si está obsoleto o no existe, lo recalcula."""
    cached = cache.get(config.INVOICES_PATH)
    if cached is not None:
        return cached

    payload = {"invoices": invoice_repo.list_invoices()}
    cache.set(config.INVOICES_PATH, payload)
    return payload

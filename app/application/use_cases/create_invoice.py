# app/application/use_cases/create_invoice.py
import logging
from datetime import date, datetime, timezone
from typing import Callable, Mapping, Optional

import config
from app.application.validation import parse_invoice_form
from app.domain.models.form_state import (
    CreateInvoiceResult,
    DATABASE_ERROR_MESSAGE,
    FormState,
    InvoiceCreated,
    InvoicePersistenceFailed,
    InvoiceValidationFailed,
    MISSING_FIELDS_MESSAGE,
)
from app.domain.models.invoice import InvoiceDraft
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class CreateInvoiceUseCase:
    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        page_cache: PageCache,
        today: Callable[[], date] = utc_today,
        invoices_path: str = config.INVOICES_PATH
    ):
        self.invoice_repo = invoice_repo
        self.page_cache = page_cache
        self.today = today
        self.invoices_path = invoices_path

    def execute(self, prev_state: Optional[FormState], form: Mapping[str, Optional[str]]) -> CreateInvoiceResult:
        """
        Orquesta el flujo: valida el formulario, inserta la factura,
        invalida la caché del listado y retorna el destino de la redirección.
        `prev_state` se recibe por continuidad con el formulario y no se usa.
        """
        # --- PASO 1: VALIDACIÓN ---
        parsed = parse_invoice_form(form)
        if not isinstance(parsed, InvoiceDraft):
            logging.info(f"Formulario de factura inválido. Campos con error: {sorted(parsed)}")
            return InvoiceValidationFailed(
                state=FormState(errors=parsed, message=MISSING_FIELDS_MESSAGE)
            )

        # --- PASO 2: PERSISTENCIA ---
        amount_in_cents = parsed.amount_in_cents
        invoice_date = self.today().isoformat()
        try:
            invoice_id = self.invoice_repo.insert_invoice(
                customer_id=parsed.customer_id,
                amount=amount_in_cents,
                status=parsed.status.value,
                date=invoice_date
            )
        except Exception:
            logging.error("Database Error: no se pudo guardar la factura.", exc_info=True)
            return InvoicePersistenceFailed(state=FormState(message=DATABASE_ERROR_MESSAGE))

        logging.info(f"Factura {invoice_id} creada para el cliente {parsed.customer_id} ({amount_in_cents} centavos).")

        # --- PASO 3: INVALIDAR CACHÉ Y REDIRIGIR ---
        self.page_cache.revalidate_path(self.invoices_path)
        return InvoiceCreated(invoice_id=invoice_id, redirect_to=self.invoices_path)

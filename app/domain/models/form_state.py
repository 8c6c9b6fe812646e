# app/domain/models/form_state.py
from pydantic import BaseModel
from typing import Dict, List, Optional, Union

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to Create Invoice."


class FormState(BaseModel):
    """
    Estado que el formulario recibe de vuelta tras un envío fallido.
    `errors` agrupa los mensajes por nombre de campo del formulario.
    """
    message: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None


class InvoiceCreated(BaseModel):
    """Resultado terminal: la factura se guardó y el cliente debe navegar a `redirect_to`."""
    invoice_id: str
    redirect_to: str


class InvoiceValidationFailed(BaseModel):
    state: FormState


class InvoicePersistenceFailed(BaseModel):
    state: FormState


CreateInvoiceResult = Union[InvoiceCreated, InvoiceValidationFailed, InvoicePersistenceFailed]

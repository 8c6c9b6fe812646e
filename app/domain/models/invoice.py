# app/domain/models/invoice.py
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

CUSTOMER_REQUIRED_MESSAGE = "Customer is required"
AMOUNT_NOT_A_NUMBER_MESSAGE = "Amount must be a number"
AMOUNT_TOO_SMALL_MESSAGE = "Amount must be greater than zero"
AMOUNT_TOO_LARGE_MESSAGE = "Amount is too large"
INVALID_STATUS_MESSAGE = "Invalid status. Expected 'pending' or 'paid'"

MINIMUM_AMOUNT = Decimal("0.01")
# La columna 'amount' es Integer (32 bits) en centavos
MAXIMUM_AMOUNT = Decimal("21474836.47")

# Solo literales decimales ASCII; sin guiones bajos, hexadecimales ni dígitos no latinos
AMOUNT_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class InvoiceDraft(BaseModel):
    """
    Factura validada a partir de los datos crudos del formulario.
    Los alias coinciden con los nombres de campo que envía el formulario.
    """
    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    model_config = ConfigDict(
        populate_by_name=True, # Permite crear el modelo con 'customer_id' o 'customerId'
        extra='ignore',        # Campos desconocidos del formulario se descartan
        frozen=True
    )

    @field_validator("customer_id", mode="before")
    @classmethod
    def _require_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise ValueError(CUSTOMER_REQUIRED_MESSAGE)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        # Un valor vacío o ausente se convierte a 0, igual que una conversión numérica del formulario
        if value is None or (isinstance(value, str) and not value.strip()):
            return Decimal(0)
        raw = str(value).strip()
        if not AMOUNT_PATTERN.match(raw):
            raise ValueError(AMOUNT_NOT_A_NUMBER_MESSAGE)
        try:
            return Decimal(raw)
        except InvalidOperation:
            raise ValueError(AMOUNT_NOT_A_NUMBER_MESSAGE)

    @field_validator("amount")
    @classmethod
    def _check_range(cls, value: Decimal) -> Decimal:
        if value < MINIMUM_AMOUNT:
            raise ValueError(AMOUNT_TOO_SMALL_MESSAGE)
        if value > MAXIMUM_AMOUNT:
            raise ValueError(AMOUNT_TOO_LARGE_MESSAGE)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> InvoiceStatus:
        try:
            return InvoiceStatus(value)
        except ValueError:
            raise ValueError(INVALID_STATUS_MESSAGE)

    @property
    def amount_in_cents(self) -> int:
        """Monto en centavos, redondeado (no truncado) para evitar errores de coma flotante."""
        return int((self.amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
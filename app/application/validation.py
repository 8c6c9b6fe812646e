# app/application/validation.py
from typing import Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from app.domain.models.invoice import InvoiceDraft

FORM_FIELDS = ("customerId", "amount", "status")


def _flatten_errors(error: ValidationError) -> Dict[str, List[str]]:
    """
    Agrupa los errores de Pydantic por nombre de campo del formulario.
    Los ValueError de nuestros validadores conservan su mensaje original.
    """
    field_errors: Dict[str, List[str]] = {}
    for err in error.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        if err["type"] == "value_error" and "error" in err.get("ctx", {}):
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        field_errors.setdefault(field, []).append(message)
    return field_errors


def parse_invoice_form(form: Mapping[str, Optional[str]]) -> Union[InvoiceDraft, Dict[str, List[str]]]:
    """
    Convierte los datos crudos del formulario en un `InvoiceDraft`.
    Si algún campo no pasa la validación, retorna un dict campo -> lista de mensajes
    con exactamente los campos que fallaron.
    """
    raw = {field: form.get(field) for field in FORM_FIELDS}
    try:
        return InvoiceDraft.model_validate(raw)
    except ValidationError as e:
        return _flatten_errors(e)

# app/domain/exceptions.py


class InvoicePersistenceError(Exception):
    """Falla al escribir en la tabla 'invoices' (conexión, restricciones, etc.)."""

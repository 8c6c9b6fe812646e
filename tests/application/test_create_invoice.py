"""Integration tests for the CreateInvoice use case.

Uses in-memory fakes: no database, no real cache.
"""

import logging
from datetime import date

from app.application.use_cases.create_invoice import CreateInvoiceUseCase
from app.domain.models.form_state import (
    DATABASE_ERROR_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    FormState,
    InvoiceCreated,
    InvoicePersistenceFailed,
    InvoiceValidationFailed,
)
from app.domain.models.invoice import AMOUNT_TOO_LARGE_MESSAGE, CUSTOMER_REQUIRED_MESSAGE
from tests.fakes import FakeInvoiceRepository, FakePageCache, failing_repository

TODAY = date(2024, 3, 15)
INVOICES_PATH = "/dashboard/invoices"


def _setup(repo=None):
    repo = repo or FakeInvoiceRepository()
    cache = FakePageCache()
    use_case = CreateInvoiceUseCase(
        invoice_repo=repo,
        page_cache=cache,
        today=lambda: TODAY,
        invoices_path=INVOICES_PATH,
    )
    return use_case, repo, cache


class TestCreateInvoiceHappyPath:

    def test_inserts_one_row_in_cents(self):
        use_case, repo, _ = _setup()
        use_case.execute(FormState(), {"customerId": "abc-1", "amount": "19.99", "status": "pending"})
        assert len(repo.inserted) == 1
        row = repo.inserted[0]
        assert row["customer_id"] == "abc-1"
        assert row["amount"] == 1999
        assert row["status"] == "pending"
        assert row["date"] == "2024-03-15"

    def test_returns_terminal_redirect(self):
        use_case, repo, _ = _setup()
        result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "5", "status": "paid"})
        assert isinstance(result, InvoiceCreated)
        assert result.redirect_to == INVOICES_PATH
        assert result.invoice_id == repo.inserted[0]["id"]

    def test_revalidates_listing_cache(self):
        use_case, _, cache = _setup()
        cache.set(INVOICES_PATH, {"invoices": []})
        use_case.execute(FormState(), {"customerId": "abc-1", "amount": "5", "status": "paid"})
        assert cache.revalidated == [INVOICES_PATH]
        assert cache.get(INVOICES_PATH) is None

    def test_previous_state_ignored(self):
        use_case, repo, _ = _setup()
        stale = FormState(message="old", errors={"amount": ["old"]})
        result = use_case.execute(stale, {"customerId": "abc-1", "amount": "5", "status": "paid"})
        assert isinstance(result, InvoiceCreated)
        assert len(repo.inserted) == 1

    def test_same_payload_twice_creates_two_rows(self):
        use_case, repo, _ = _setup()
        form = {"customerId": "abc-1", "amount": "19.99", "status": "pending"}
        first = use_case.execute(FormState(), form)
        second = use_case.execute(FormState(), form)
        assert len(repo.inserted) == 2
        assert first.invoice_id != second.invoice_id


class TestCreateInvoiceValidation:

    def test_empty_customer_returns_errors(self):
        use_case, repo, cache = _setup()
        result = use_case.execute(FormState(), {"customerId": "", "amount": "5", "status": "paid"})
        assert isinstance(result, InvoiceValidationFailed)
        assert result.state.model_dump(exclude_none=True) == {
            "errors": {"customerId": [CUSTOMER_REQUIRED_MESSAGE]},
            "message": MISSING_FIELDS_MESSAGE,
        }
        assert repo.inserted == []
        assert cache.revalidated == []

    def test_zero_amount_never_inserts(self):
        use_case, repo, _ = _setup()
        result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "0", "status": "paid"})
        assert isinstance(result, InvoiceValidationFailed)
        assert list(result.state.errors) == ["amount"]
        assert repo.inserted == []

    def test_bad_status_never_inserts(self):
        use_case, repo, _ = _setup()
        result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "1", "status": "overdue"})
        assert isinstance(result, InvoiceValidationFailed)
        assert list(result.state.errors) == ["status"]
        assert repo.inserted == []

    def test_huge_amount_is_a_field_error_not_a_database_error(self, caplog):
        use_case, repo, cache = _setup()
        with caplog.at_level(logging.ERROR):
            result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "1e40", "status": "paid"})
        assert isinstance(result, InvoiceValidationFailed)
        assert result.state.errors == {"amount": [AMOUNT_TOO_LARGE_MESSAGE]}
        assert "Database Error" not in caplog.text
        assert repo.inserted == []
        assert cache.revalidated == []


class TestCreateInvoicePersistenceFailure:

    def test_returns_generic_database_message(self):
        use_case, _, _ = _setup(repo=failing_repository())
        result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "19.99", "status": "pending"})
        assert isinstance(result, InvoicePersistenceFailed)
        assert result.state.model_dump(exclude_none=True) == {"message": DATABASE_ERROR_MESSAGE}

    def test_no_cache_invalidation_on_failure(self):
        use_case, _, cache = _setup(repo=failing_repository())
        use_case.execute(FormState(), {"customerId": "abc-1", "amount": "19.99", "status": "pending"})
        assert cache.revalidated == []

    def test_any_exception_is_collapsed(self):
        use_case, _, _ = _setup(repo=FakeInvoiceRepository(fail_with=RuntimeError("boom")))
        result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "1", "status": "paid"})
        assert isinstance(result, InvoicePersistenceFailed)

    def test_cause_is_logged_not_returned(self, caplog):
        use_case, _, _ = _setup(repo=failing_repository("duplicate key value"))
        with caplog.at_level(logging.ERROR):
            result = use_case.execute(FormState(), {"customerId": "abc-1", "amount": "1", "status": "paid"})
        assert "duplicate key value" in caplog.text
        assert "duplicate key value" not in result.state.message

"""Unit tests for InvoiceLedgerService."""

from datetime import datetime

import pytest

from goldbook.core.entities import PaymentDirection, PaymentMethod, SaleChannel
from goldbook.core.exceptions import InvalidAmountError, PaymentExceedsBalanceError
from goldbook.core.services import BalanceState, InvoiceLedgerService


@pytest.fixture
def service():
    return InvoiceLedgerService()


@pytest.fixture
def open_invoice(make_invoice, make_sell):
    """Net total 100, nothing paid."""
    return make_invoice(items=[make_sell(weight=1, price_per_gram=100)])


class TestPricing:
    def test_item_total_ignores_non_positive_weight(self, service, make_sell):
        assert service.compute_item_total(make_sell(weight=0)) == 0
        assert service.compute_item_total(make_sell(weight=2, price_per_gram=10)) == 20

    def test_recompute_refreshes_derived_fields(self, service, open_invoice, make_sell):
        updated = service.recompute(
            open_invoice,
            items=[make_sell(weight=2, price_per_gram=100)],
            channel=SaleChannel.ONLINE,
            shipping=30,
        )
        assert updated.id == open_invoice.id
        assert updated.net_total == pytest.approx(230)
        assert open_invoice.net_total == pytest.approx(100)


class TestValidateAmount:
    @pytest.mark.parametrize("amount", ["abc", None, 0, -5, float("nan"), float("inf")])
    def test_rejects_bad_amounts(self, service, amount):
        with pytest.raises(InvalidAmountError):
            service.validate_amount(amount)

    def test_parses_numeric_text(self, service):
        assert service.validate_amount("12.5") == 12.5


class TestApplyPayment:
    def test_debt_payment_reduces_balance(self, service, open_invoice):
        updated = service.apply_payment(open_invoice, 40, PaymentMethod.INSTAPAY)

        assert updated.amount_paid == pytest.approx(40)
        assert updated.remaining_balance == pytest.approx(60)
        assert updated.payments[-1].method == PaymentMethod.INSTAPAY
        assert updated.payments[-1].amount == 40
        # the input invoice is untouched
        assert open_invoice.payments == []

    def test_credit_payment_is_negative(self, service, make_invoice, make_buy_back_24k):
        invoice = make_invoice(items=[make_buy_back_24k(weight=1, price_per_gram=3000)])
        assert invoice.remaining_balance == pytest.approx(-3000)

        updated = service.apply_payment(
            invoice, 1000, direction=PaymentDirection.CREDIT
        )
        assert updated.payments[-1].amount == -1000
        assert updated.remaining_balance == pytest.approx(-2000)

    def test_payment_date(self, service, open_invoice):
        paid_at = datetime(2024, 6, 1, 9, 30)
        updated = service.apply_payment(open_invoice, 10, paid_at=paid_at)
        assert updated.payments[-1].date == paid_at

    def test_sequence_of_payments(self, service, open_invoice):
        invoice = service.apply_payment(open_invoice, 10)
        invoice = service.apply_payment(invoice, 20)
        invoice = service.apply_payment(invoice, 5, direction=PaymentDirection.CREDIT)
        assert invoice.amount_paid == pytest.approx(25)
        assert invoice.remaining_balance == pytest.approx(75)

    def test_apply_payment_has_no_ceiling(self, service, open_invoice):
        updated = service.apply_payment(open_invoice, 500)
        assert updated.remaining_balance == pytest.approx(-400)


class TestValidatePayment:
    def test_within_balance(self, service, open_invoice):
        assert service.validate_payment(open_invoice, "100", PaymentDirection.DEBT) == 100

    def test_epsilon_tolerance(self, service, open_invoice):
        assert service.validate_payment(open_invoice, 100.005, PaymentDirection.DEBT) == 100.005

    def test_exceeding_balance(self, service, open_invoice):
        with pytest.raises(PaymentExceedsBalanceError) as exc_info:
            service.validate_payment(open_invoice, 150, PaymentDirection.DEBT)
        assert exc_info.value.details["outstanding"] == pytest.approx(100)

    def test_credit_uses_absolute_balance(self, service, make_invoice, make_buy_back):
        invoice = make_invoice(items=[make_buy_back(weight=1, price_per_gram=500)])
        assert service.validate_payment(invoice, 500, PaymentDirection.CREDIT) == 500
        with pytest.raises(PaymentExceedsBalanceError):
            service.validate_payment(invoice, 501, PaymentDirection.CREDIT)

    def test_ceiling_can_be_disabled(self, open_invoice):
        service = InvoiceLedgerService(enforce_payment_ceiling=False)
        assert service.validate_payment(open_invoice, 1000, PaymentDirection.DEBT) == 1000


class TestBalanceQueries:
    def test_balance_state(self, service, open_invoice):
        assert service.balance_state(open_invoice) == BalanceState.DUE

        settled = service.apply_payment(open_invoice, 99.995)
        assert service.balance_state(settled) == BalanceState.SETTLED
        assert service.is_settled(settled)

        overpaid = service.apply_payment(open_invoice, 150)
        assert service.balance_state(overpaid) == BalanceState.OWED_TO_CUSTOMER

    def test_customer_debts_filter_by_phone(self, service, make_invoice, make_sell):
        invoices = [
            make_invoice(phone="01011111111"),
            make_invoice(phone="01222222222"),
            make_invoice(phone="01033333333", payments=[1000.0]),
        ]
        assert len(service.customer_debts(invoices)) == 2
        matched = service.customer_debts(invoices, "0122")
        assert [inv.customer.phone for inv in matched] == ["01222222222"]

    def test_customer_credits_filter_by_name(self, service, make_invoice, make_buy_back):
        invoices = [
            make_invoice(items=[make_buy_back()], customer_name="Mona Adel"),
            make_invoice(items=[make_buy_back()], customer_name="Karim"),
            make_invoice(customer_name="Mona Sami"),
        ]
        credits = service.customer_credits(invoices, "mona")
        assert [inv.customer.name for inv in credits] == ["Mona Adel"]

    def test_search_invoices(self, service, make_invoice):
        invoices = [
            make_invoice(customer_name="Hala", phone="01000000001"),
            make_invoice(customer_name="Omar", phone="01000000002"),
        ]
        assert len(service.search_invoices(invoices, "")) == 2
        assert [i.customer.name for i in service.search_invoices(invoices, "HAL")] == ["Hala"]
        assert [i.customer.name for i in service.search_invoices(invoices, "002")] == ["Omar"]

    def test_totals(self, service, make_invoice, make_sell, make_buy_back):
        invoices = [
            make_invoice(items=[make_sell(weight=1, price_per_gram=100)], payments=[30.0]),
            make_invoice(items=[make_buy_back(weight=1, price_per_gram=50)]),
        ]
        assert service.total_outstanding(invoices) == pytest.approx(70)
        assert service.total_owed_to_customers(invoices) == pytest.approx(50)

"""Tests for the Liskov-safe loan payment hierarchy."""

from __future__ import annotations

import pytest

from solidctl.domain.payments import (
    CreditCardLoan,
    HomeLoan,
    LoanClosureService,
    LoanPayment,
    SecureLoan,
)
from tests.conftest import Transcript


class TestContracts:
    @pytest.mark.parametrize("loan_cls", [HomeLoan, CreditCardLoan])
    def test_every_loan_pays(self, loan_cls: type, transcript: Transcript) -> None:
        loan = loan_cls(transcript.echo)
        assert isinstance(loan, LoanPayment)
        loan.do_payment()
        assert len(transcript.lines) == 1

    def test_only_home_loan_is_secure(self) -> None:
        assert isinstance(HomeLoan(), SecureLoan)
        assert not isinstance(CreditCardLoan(), SecureLoan)

    def test_credit_card_loan_has_no_foreclosure(self) -> None:
        assert not hasattr(CreditCardLoan(), "fore_close_loan")


class TestLoanClosureService:
    def test_closes_home_loan(self, transcript: Transcript) -> None:
        LoanClosureService(HomeLoan(transcript.echo)).close_loan()
        assert transcript == ["Foreclosing home loan payment"]

    def test_rejects_credit_card_loan_at_construction(self) -> None:
        with pytest.raises(TypeError, match="CreditCardLoan does not support foreclosure"):
            LoanClosureService(CreditCardLoan())  # type: ignore[arg-type]

    def test_accepts_any_structural_secure_loan(self, transcript: Transcript) -> None:
        class AutoLoan:
            def do_payment(self) -> None:
                transcript.echo("pay")

            def fore_close_loan(self) -> None:
                transcript.echo("foreclose")

        LoanClosureService(AutoLoan()).close_loan()
        assert transcript == ["foreclose"]

    def test_home_loan_lines(self, transcript: Transcript) -> None:
        loan = HomeLoan(transcript.echo)
        loan.do_payment()
        loan.fore_close_loan()
        assert transcript == ["Making home loan payment", "Foreclosing home loan payment"]

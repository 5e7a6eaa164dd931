"""A broad payment contract that not every loan can honour.

:class:`CreditCardLoan` claims :class:`LoanPayment` but cannot foreclose, so
substituting it into :class:`LoanClosureService` fails at call time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solidctl.domain.types import EchoMixin


class LoanPayment(EchoMixin, ABC):
    @abstractmethod
    def do_payment(self) -> None: ...

    @abstractmethod
    def fore_close_loan(self) -> None: ...


class HomeLoan(LoanPayment):
    def do_payment(self) -> None:
        self._echo("Making home loan payment")

    def fore_close_loan(self) -> None:
        self._echo("Foreclosing home loan payment")


class CreditCardLoan(LoanPayment):
    def do_payment(self) -> None:
        self._echo("Making Credit card loan payment")

    def fore_close_loan(self) -> None:
        msg = "Method not implemented."
        raise NotImplementedError(msg)


class LoanClosureService:
    def __init__(self, loan: LoanPayment) -> None:
        self._loan = loan

    def close_loan(self) -> None:
        self._loan.fore_close_loan()

"""Liskov Substitution: foreclosure lives on its own, narrower contract.

Every :class:`LoanPayment` can pay. Only loans that can genuinely be
foreclosed claim :class:`SecureLoan`, so :class:`LoanClosureService` can call
``fore_close_loan`` on anything it accepts.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from solidctl.domain.types import EchoMixin


@runtime_checkable
class LoanPayment(Protocol):
    def do_payment(self) -> None: ...


@runtime_checkable
class SecureLoan(LoanPayment, Protocol):
    """A loan that also supports foreclosure."""

    def fore_close_loan(self) -> None: ...


class HomeLoan(EchoMixin):
    def do_payment(self) -> None:
        self._echo("Making home loan payment")

    def fore_close_loan(self) -> None:
        self._echo("Foreclosing home loan payment")


class CreditCardLoan(EchoMixin):
    """Pays, but has no foreclosure and so never claims :class:`SecureLoan`."""

    def do_payment(self) -> None:
        self._echo("Making Credit card loan payment")


class LoanClosureService:
    """Closes a loan through its foreclosure operation.

    Raises:
        TypeError: At construction, if *loan* does not satisfy :class:`SecureLoan`.
    """

    def __init__(self, loan: SecureLoan) -> None:
        if not isinstance(loan, SecureLoan):
            msg = f"{type(loan).__name__} does not support foreclosure"
            raise TypeError(msg)
        self._loan = loan

    def close_loan(self) -> None:
        self._loan.fore_close_loan()

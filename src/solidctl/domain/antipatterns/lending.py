"""A broad loan contract that forces notification onto every loan type."""

from __future__ import annotations

from abc import ABC, abstractmethod

from solidctl.domain.types import EchoMixin


class LoanProcessor(EchoMixin, ABC):
    @abstractmethod
    def apply_loan(self) -> None: ...

    @abstractmethod
    def approve_loan(self) -> None: ...

    @abstractmethod
    def process_payment(self) -> None: ...

    @abstractmethod
    def send_notification(self) -> None: ...


class PersonalLoan(LoanProcessor):
    def apply_loan(self) -> None:
        self._echo("Applying for a personal loan.")

    def approve_loan(self) -> None:
        self._echo("Approving personal loan.")

    def process_payment(self) -> None:
        self._echo("Processing personal loan payment.")

    def send_notification(self) -> None:
        self._echo("Sending notification for personal loan.")


class BusinessLoan(LoanProcessor):
    def apply_loan(self) -> None:
        self._echo("Applying for a business loan.")

    def approve_loan(self) -> None:
        self._echo("Approving business loan.")

    def process_payment(self) -> None:
        self._echo("Processing business loan payment.")

    def send_notification(self) -> None:
        self._echo("Sending notification for business loan.")


class CarLoan(LoanProcessor):
    def apply_loan(self) -> None:
        self._echo("Applying for a car loan.")

    def approve_loan(self) -> None:
        self._echo("Approving car loan.")

    def process_payment(self) -> None:
        self._echo("Processing car loan payment.")

    # Not needed for car loans, but the interface demands it.
    def send_notification(self) -> None:
        self._echo("Sending notification for car loan.")

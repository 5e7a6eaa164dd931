"""Interface Segregation: notification is an opt-in capability.

Two decompositions give the same guarantee that a base-only consumer never
sees ``send_notification``:

- extension: :class:`LoanProcessorWithNotification` extends :class:`LoanProcessor`;
- composition: :class:`Notifier` is a separate contract a loan implements
  alongside :class:`LoanProcessor` (see :class:`NotificationMixin`).
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from solidctl.domain.types import Echo, EchoMixin


@runtime_checkable
class LoanProcessor(Protocol):
    """Core operations every loan type needs."""

    def apply_loan(self) -> None: ...

    def approve_loan(self) -> None: ...

    def process_payment(self) -> None: ...


@runtime_checkable
class LoanProcessorWithNotification(LoanProcessor, Protocol):
    def send_notification(self) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    def send_notification(self) -> None: ...


class _Loan(EchoMixin):
    kind: ClassVar[str]

    def apply_loan(self) -> None:
        self._echo(f"Applying for a {self.kind} loan.")

    def approve_loan(self) -> None:
        self._echo(f"Approving {self.kind} loan.")

    def process_payment(self) -> None:
        self._echo(f"Processing {self.kind} loan payment.")


class NotificationMixin:
    """Adds the :class:`Notifier` capability to a loan."""

    kind: ClassVar[str]
    _echo: Echo

    def send_notification(self) -> None:
        self._echo(f"Sending notification for {self.kind} loan.")


class PersonalLoan(NotificationMixin, _Loan):
    kind = "personal"


class BusinessLoan(NotificationMixin, _Loan):
    kind = "business"


class CarLoan(_Loan):
    """Base processing only; has no ``send_notification`` attribute."""

    kind = "car"


class LoanDesk:
    """Runs the core workflow on any :class:`LoanProcessor`."""

    def __init__(self, processor: LoanProcessor) -> None:
        if not isinstance(processor, LoanProcessor):
            msg = f"{type(processor).__name__} is not a LoanProcessor"
            raise TypeError(msg)
        self._processor = processor

    def process(self) -> None:
        self._processor.apply_loan()
        self._processor.approve_loan()
        self._processor.process_payment()


class NotificationCenter:
    """Sends notifications; accepts only loans that opted into :class:`Notifier`."""

    def __init__(self, notifier: Notifier) -> None:
        if not isinstance(notifier, Notifier):
            msg = f"{type(notifier).__name__} does not send notifications"
            raise TypeError(msg)
        self._notifier = notifier

    def notify(self) -> None:
        self._notifier.send_notification()

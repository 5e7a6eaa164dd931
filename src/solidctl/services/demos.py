"""The demo scripts: one per principle and variant, plus the catalog text.

Each script builds its variants, injects them into their consumers, and
prints through *echo*. Scripts take the ``[demo]`` config section for the
few inputs a user may want to change.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from solidctl.config.models import DemoConfig
from solidctl.domain import discounts, lending, payments, storage, users
from solidctl.domain.antipatterns import discounts as bad_discounts
from solidctl.domain.antipatterns import lending as bad_lending
from solidctl.domain.antipatterns import payments as bad_payments
from solidctl.domain.antipatterns import storage as bad_storage
from solidctl.domain.antipatterns import users as bad_users
from solidctl.domain.types import Echo, Principle, Variant

DemoScript = Callable[[Echo, DemoConfig], None]

# Payload of the hardwired DIP demo; fixed, like the service itself.
HARDWIRED_USER_DATA = "John Doe"

_DEMO_USERS = [
    users.User(1, "Kanishk"),
    users.User(2, "Rohan"),
    users.User(3, "Karan"),
    users.User(4, "Vishnu"),
]


@dataclass(frozen=True)
class PrincipleInfo:
    key: Principle
    title: str
    summary: str


PRINCIPLES: dict[Principle, PrincipleInfo] = {
    Principle.SRP: PrincipleInfo(
        Principle.SRP,
        "Single Responsibility",
        "A class should have one, and only one, reason to change.",
    ),
    Principle.OCP: PrincipleInfo(
        Principle.OCP,
        "Open/Closed",
        "Open for extension, closed for modification.",
    ),
    Principle.LSP: PrincipleInfo(
        Principle.LSP,
        "Liskov Substitution",
        "Subtypes must be usable wherever their base type is expected.",
    ),
    Principle.ISP: PrincipleInfo(
        Principle.ISP,
        "Interface Segregation",
        "No class should be forced to implement methods it does not use.",
    ),
    Principle.DIP: PrincipleInfo(
        Principle.DIP,
        "Dependency Inversion",
        "Depend on abstractions handed in from outside, not on concrete classes.",
    ),
}


# ── Single Responsibility ────────────────────────────────────────────


def srp_good(echo: Echo, demo: DemoConfig) -> None:
    manager = users.UserManager(echo)
    for user in _DEMO_USERS:
        manager.add_user(user)

    auth = users.AuthenticationManager(echo)
    auth.authenticate_user(1, "Kanishk", manager.get_users())
    auth.authenticate_user(3, "Rohan", manager.get_users())

    manager.remove_user(1)
    auth.authenticate_user(1, "Kanishk", manager.get_users())


def srp_bad(echo: Echo, demo: DemoConfig) -> None:
    manager = bad_users.UserManager(echo)
    for user in _DEMO_USERS:
        manager.add_user(user)

    manager.authenticate_user(1, "Kanishk")
    manager.authenticate_user(3, "Rohan")

    manager.remove_user(1)
    manager.authenticate_user(1, "Kanishk")


# ── Open/Closed ──────────────────────────────────────────────────────


def ocp_good(echo: Echo, demo: DemoConfig) -> None:
    calculator = discounts.DiscountCalculator()
    fmt = discounts.format_amount
    amount = demo.amount

    def apply(fn: discounts.DiscountFn | None = None) -> str:
        return fmt(calculator.calculate_discount(amount, fn))

    echo(f"Regular Discount: {apply(discounts.regular_discount)}")
    echo(f"Premium Discount: {apply(discounts.premium_discount)}")
    echo(f"Gold Discount: {apply(discounts.gold_discount)}")
    echo(f"No Discount: {apply()}")
    echo(f"Diamond Discount: {apply(discounts.diamond_discount)}")


def ocp_bad(echo: Echo, demo: DemoConfig) -> None:
    calculator = bad_discounts.DiscountCalculator()
    fmt = discounts.format_amount
    amount = demo.amount

    echo(f"Regular Discount: {fmt(calculator.calculate_discount('regular', amount))}")
    echo(f"Premium Discount: {fmt(calculator.calculate_discount('premium', amount))}")
    echo(f"Gold Discount: {fmt(calculator.calculate_discount('gold', amount))}")
    echo(f"No Discount: {fmt(calculator.calculate_discount('none', amount))}")


# ── Liskov Substitution ──────────────────────────────────────────────


def lsp_good(echo: Echo, demo: DemoConfig) -> None:
    # Only SecureLoan variants get here; a CreditCardLoan is rejected at construction.
    payments.LoanClosureService(payments.HomeLoan(echo)).close_loan()


def lsp_bad(echo: Echo, demo: DemoConfig) -> None:
    home_closure = bad_payments.LoanClosureService(bad_payments.HomeLoan(echo))
    credit_closure = bad_payments.LoanClosureService(bad_payments.CreditCardLoan(echo))

    home_closure.close_loan()
    credit_closure.close_loan()  # raises NotImplementedError


# ── Interface Segregation ────────────────────────────────────────────


def isp_good(echo: Echo, demo: DemoConfig) -> None:
    lending.NotificationCenter(lending.PersonalLoan(echo)).notify()
    lending.NotificationCenter(lending.BusinessLoan(echo)).notify()
    # Car loans are plain processors: accepted by LoanDesk, nothing to notify.
    lending.LoanDesk(lending.CarLoan(echo))


def isp_bad(echo: Echo, demo: DemoConfig) -> None:
    bad_lending.PersonalLoan(echo).send_notification()
    bad_lending.BusinessLoan(echo).send_notification()
    bad_lending.CarLoan(echo).send_notification()


# ── Dependency Inversion ─────────────────────────────────────────────


def dip_good(echo: Echo, demo: DemoConfig) -> None:
    for database_cls in (storage.SqlDB, storage.NoSqlDB, storage.H2DB):
        service = storage.UserService(database_cls(echo), echo)
        service.save_user_data(demo.user_data)


def dip_bad(echo: Echo, demo: DemoConfig) -> None:
    bad_storage.UserService(echo).save_user_data(HARDWIRED_USER_DATA)


DEMOS: dict[tuple[Principle, Variant], DemoScript] = {
    (Principle.SRP, Variant.GOOD): srp_good,
    (Principle.SRP, Variant.BAD): srp_bad,
    (Principle.OCP, Variant.GOOD): ocp_good,
    (Principle.OCP, Variant.BAD): ocp_bad,
    (Principle.LSP, Variant.GOOD): lsp_good,
    (Principle.LSP, Variant.BAD): lsp_bad,
    (Principle.ISP, Variant.GOOD): isp_good,
    (Principle.ISP, Variant.BAD): isp_bad,
    (Principle.DIP, Variant.GOOD): dip_good,
    (Principle.DIP, Variant.BAD): dip_bad,
}

"""Principle and variant enums plus the line-sink type shared by every snippet."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

Echo = Callable[[str], None]


class Principle(StrEnum):
    """The five SOLID principles, keyed by their usual abbreviation."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"


class Variant(StrEnum):
    """Which side of a snippet pair to run."""

    GOOD = "good"
    BAD = "bad"


class EchoMixin:
    """Base for snippet classes that print through an injected line sink.

    Defaults to :func:`print` so the classes behave like the plain scripts
    when used directly; demo runners pass a transcript's ``append`` instead.
    """

    def __init__(self, echo: Echo = print) -> None:
        self._echo = echo

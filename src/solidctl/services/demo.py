"""DemoService: run the snippet pairs and describe the catalog."""

from __future__ import annotations

import logging
from typing import Any

from solidctl.domain.types import Principle, Variant
from solidctl.services.base import BaseService
from solidctl.services.contracts import (
    CatalogResultData,
    DemoRunData,
    RunAllResultData,
    dump_validated,
)
from solidctl.services.demos import DEMOS, PRINCIPLES
from solidctl.services.result import ServiceResult
from solidctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class DemoService(BaseService):
    """Runs demo scripts and captures their printed lines as data."""

    @traced
    def catalog(self) -> ServiceResult:
        items = [
            {
                "key": str(info.key),
                "title": info.title,
                "summary": info.summary,
                "variants": [str(v) for v in Variant if (info.key, v) in DEMOS],
            }
            for info in PRINCIPLES.values()
        ]
        data = dump_validated(CatalogResultData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="catalog", data=data)

    @traced
    def run(self, principle: str, variant: str = "good") -> ServiceResult:
        """Run one demo.

        Returns ``ok=False`` with code ``NOT_IMPLEMENTED`` when the variant
        hits an operation it only pretends to support; the lines printed
        before the failure are kept in ``error.detail["lines"]``.
        """
        op = "run"
        resolved = _resolve(op, principle, variant)
        if isinstance(resolved, ServiceResult):
            return resolved
        key, var = resolved

        outcome = self._execute(key, var)
        if not outcome["ok"]:
            return ServiceResult.failure(
                op,
                "NOT_IMPLEMENTED",
                outcome["error"],
                principle=str(key),
                variant=str(var),
                lines=outcome["lines"],
            )
        return ServiceResult(ok=True, op=op, data=dump_validated(DemoRunData, outcome))

    @traced
    def run_all(self, variant: str = "good") -> ServiceResult:
        """Run every principle's demo for *variant*, in catalog order.

        A failing demo does not stop the rest; it is reported in its entry
        and as a warning.
        """
        op = "run_all"
        try:
            var = Variant(variant.strip().lower())
        except ValueError:
            return _unknown_variant(op, variant)

        demos: list[dict[str, Any]] = []
        warnings: list[str] = []
        for key in PRINCIPLES:
            with trace_span(f"demo.{key}") as span:
                outcome = self._execute(key, var)
                if span is not None:
                    span.annotate("lines", len(outcome["lines"]))
            if not outcome["ok"]:
                warnings.append(f"{key}: {outcome['error']}")
            demos.append(outcome)

        data = dump_validated(
            RunAllResultData,
            {
                "variant": str(var),
                "count": len(demos),
                "failed": sum(1 for d in demos if not d["ok"]),
                "demos": demos,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _execute(self, principle: Principle, variant: Variant) -> dict[str, Any]:
        lines: list[str] = []
        outcome: dict[str, Any] = {
            "principle": str(principle),
            "variant": str(variant),
            "title": PRINCIPLES[principle].title,
            "ok": True,
            "lines": lines,
            "error": None,
        }
        script = DEMOS[(principle, variant)]
        logger.debug("Running demo %s/%s", principle, variant)
        try:
            script(lines.append, self._settings.demo)
        except NotImplementedError as exc:
            logger.debug("Demo %s/%s hit an unimplemented method", principle, variant)
            outcome["ok"] = False
            outcome["error"] = str(exc) or "Method not implemented."
        return outcome


def _resolve(op: str, principle: str, variant: str) -> tuple[Principle, Variant] | ServiceResult:
    """Parse the user's names, or return the failure to report."""
    try:
        key = Principle(principle.strip().lower())
    except ValueError:
        return ServiceResult.failure(
            op,
            "UNKNOWN_PRINCIPLE",
            f"Unknown principle: {principle!r}",
            available=[str(p) for p in Principle],
        )
    try:
        var = Variant(variant.strip().lower())
    except ValueError:
        return _unknown_variant(op, variant)
    return key, var


def _unknown_variant(op: str, variant: str) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "UNKNOWN_VARIANT",
        f"Unknown variant: {variant!r}",
        available=[str(v) for v in Variant],
    )

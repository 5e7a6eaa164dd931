"""Typed payload contracts for service results.

These models validate payload shapes before they leave the service layer,
so a renamed key (``lines`` vs ``transcript``) fails fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

_M = TypeVar("_M", bound=BaseModel)


def dump_validated(model_cls: type[_M], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class CatalogItem(BaseModel):
    """One principle in the catalog."""

    key: str
    title: str
    summary: str
    variants: list[Literal["good", "bad"]]


class CatalogResultData(BaseModel):
    """Payload contract for ``DemoService.catalog``."""

    count: int
    items: list[CatalogItem]


class DemoRunData(BaseModel):
    """Payload contract for ``DemoService.run`` and each ``run_all`` entry."""

    model_config = ConfigDict(extra="allow")

    principle: str
    variant: Literal["good", "bad"]
    title: str
    ok: bool = True
    lines: list[str] = Field(default_factory=list)
    error: str | None = None


class RunAllResultData(BaseModel):
    """Payload contract for ``DemoService.run_all``."""

    variant: Literal["good", "bad"]
    count: int
    failed: int
    demos: list[DemoRunData]


class DiscountResultData(BaseModel):
    """Payload contract for ``DiscountService.calculate``."""

    amount: float
    tier: str | None = None
    discount: float
    total: float


class TierItem(BaseModel):
    name: str
    source: Literal["builtin", "config", "plugin"]
    example: float


class TiersResultData(BaseModel):
    """Payload contract for ``DiscountService.list_tiers``."""

    count: int
    items: list[TierItem]


class SaveResultData(BaseModel):
    """Payload contract for ``StorageService.save``."""

    database: str
    data: str
    lines: list[str]

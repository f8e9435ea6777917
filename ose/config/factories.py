"""Named builders for outer-layer components (data sources, API app)."""

from __future__ import annotations

import time
from typing import Callable, Generic, TypeVar

from ose.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__, component="factory")


class FactoryBase(Generic[T]):
    """Defer construction of a component and log what was built."""

    def __init__(self, name: str, builder: Callable[[], T]) -> None:
        self.name = name
        self.builder = builder

    def create(self) -> T:
        started = time.perf_counter()
        component = self.builder()
        log.info(
            "Component loaded",
            extra={
                "type": component.__class__.__name__,
                "component_name": self.name,
                "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            },
        )
        return component


__all__ = ["FactoryBase"]

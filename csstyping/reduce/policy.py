"""Policy toggles for the grammar reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

type CyclePolicy = Literal["data_type", "string"]

_CYCLE_POLICIES = get_args(CyclePolicy.__value__)


@dataclass(frozen=True, slots=True)
class ReducerPolicy:
    """How the reducer answers a property reference that is already being expanded.

    - `data_type`: contribute a symbolic `data_type("'name'")` reference.
    - `string`: contribute the generic STRING fallback.
    """

    on_cycle: CyclePolicy = "data_type"

    def __post_init__(self) -> None:
        if self.on_cycle not in _CYCLE_POLICIES:
            raise ValueError(f"Unknown cycle policy {self.on_cycle!r}; expected one of {_CYCLE_POLICIES}")

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass(frozen=True)
class CallOk:
    outputs: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def single_value(self) -> bool:
        return len(self.outputs) == 1


@dataclass(frozen=True)
class CallFailed:
    reason: str | None = None


FunctionCallResult = CallOk | CallFailed


class TokenMetadata(TypedDict, total=False):
    name: str
    symbol: str
    decimals: int
    total_supply: int

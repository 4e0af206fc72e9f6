from enum import Enum


class TokenField(str, Enum):
    NAME = "name"
    SYMBOL = "symbol"
    DECIMALS = "decimals"
    TOTAL_SUPPLY = "total_supply"

    @classmethod
    def from_function_name(cls, function_name: str) -> "TokenField | None":
        return _FUNCTION_FIELDS.get(function_name)

    @property
    def is_text(self) -> bool:
        return self in (TokenField.NAME, TokenField.SYMBOL)


_FUNCTION_FIELDS = {
    "name": TokenField.NAME,
    "symbol": TokenField.SYMBOL,
    "decimals": TokenField.DECIMALS,
    "totalSupply": TokenField.TOTAL_SUPPLY,
}

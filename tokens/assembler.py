"""
Assembles a token metadata record from the raw results of the
name/symbol/decimals/totalSupply calls.

Every step narrows the field set, none of them raises: a field whose call
failed, returned zero or several values, or held undecodable text ends up
absent (or, for ``name``, replaced by a short address label).
"""
import logging
from collections.abc import Mapping
from typing import Any

from enums.token import TokenField
from tokens.dto import CallOk, FunctionCallResult, TokenMetadata
from utils.address import address_label


module_logger = logging.getLogger(__name__)

MAX_STRING_BYTES = 255
NAME_FALLBACK_LENGTH = 6


def assemble(
    raw_results: Mapping[str, FunctionCallResult],
    contract_address: str | bytes,
) -> TokenMetadata:
    """
    Build the partial record for ``contract_address`` from raw call results.

    ``name`` and ``symbol`` are capped at 255 UTF-8 bytes with a raw byte cut.
    A cut through a multi-byte character leaves a lone surrogate at the end of
    the string, so encode these values with ``surrogateescape``, not plain
    ``.encode("utf-8")``.
    """
    fields = _select_fields(raw_results)
    name_key, symbol_key = TokenField.NAME.value, TokenField.SYMBOL.value

    if name_key in fields:
        fields[name_key] = repair_name(fields[name_key], contract_address)

    if symbol_key in fields:
        symbol = repair_symbol(fields[symbol_key])
        if symbol is None:
            del fields[symbol_key]
        else:
            fields[symbol_key] = symbol

    for field in TokenField:
        if field.is_text and field.value in fields:
            fields[field.value] = truncate_bytes(fields[field.value])

    return TokenMetadata(**fields)


def _select_fields(raw_results: Mapping[str, FunctionCallResult]) -> dict[str, Any]:
    fields = {}
    for function_name, result in raw_results.items():
        field = TokenField.from_function_name(function_name)
        if field is None:
            module_logger.debug("Ignoring unexpected function result %r", function_name)
            continue
        if isinstance(result, CallOk) and result.single_value:
            fields[field.value] = result.outputs[0]
    return fields


def repair_name(value: str | bytes, contract_address: str | bytes) -> str:
    text = decode_text(value)
    if text is None:
        label = address_label(contract_address, NAME_FALLBACK_LENGTH)
        module_logger.debug("Invalid token name for %s, using %r", contract_address, label)
        return label
    return remove_null_bytes(text)


def repair_symbol(value: str | bytes) -> str | None:
    text = decode_text(value)
    if text is None:
        module_logger.debug("Dropping invalid token symbol %r", value)
        return None
    return remove_null_bytes(text)


def decode_text(value: str | bytes) -> str | None:
    """Return ``value`` as str when it is valid UTF-8 text, otherwise None."""
    try:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        if isinstance(value, str):
            value.encode("utf-8")
            return value
    except UnicodeError:
        return None
    return None


def remove_null_bytes(text: str) -> str:
    return text.replace("\0", "")


def byte_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


def truncate_bytes(text: str, limit: int = MAX_STRING_BYTES) -> str:
    """
    Cut ``text`` to its first ``limit`` UTF-8 bytes.

    The cut is a raw byte cut and may split a multi-byte character. The
    dangling bytes are kept as surrogate escapes, so encoding the result with
    ``surrogateescape`` gives back exactly the first ``limit`` bytes.
    """
    encoded = text.encode("utf-8", "surrogateescape")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", "surrogateescape")

from eth_utils import to_hex


def canonical_address(address: str | bytes) -> str:
    """Lowercase 0x-prefixed hex for raw bytes, caller strings as given."""
    if isinstance(address, (bytes, bytearray)):
        return to_hex(bytes(address))
    return str(address)


def address_label(address: str | bytes, length: int = 6) -> str:
    return canonical_address(address)[:length]

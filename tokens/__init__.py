from tokens.assembler import assemble
from tokens.dto import CallFailed, CallOk, FunctionCallResult, TokenMetadata
from tokens.functions import CONTRACT_ABI, CONTRACT_FUNCTIONS


__all__ = [
    "assemble",
    "CallFailed",
    "CallOk",
    "FunctionCallResult",
    "TokenMetadata",
    "CONTRACT_ABI",
    "CONTRACT_FUNCTIONS",
]

"""
ABI fragment and call arguments for reading ERC-20 metadata.
"""
from types import MappingProxyType


CONTRACT_ABI = (
    {
        "constant": True,
        "inputs": [],
        "name": "name",
        "outputs": [{"name": "", "type": "string"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"name": "", "type": "uint256"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
)

# Function name -> call arguments. None of the metadata getters take input.
CONTRACT_FUNCTIONS = MappingProxyType({
    "totalSupply": (),
    "decimals": (),
    "name": (),
    "symbol": (),
})


def find_function(abi, function_name: str) -> dict | None:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    return None


def output_types(abi, function_name: str) -> list[str] | None:
    entry = find_function(abi, function_name)
    if entry is None:
        return None
    return [output["type"] for output in entry.get("outputs", [])]

from chains.registery import ChainRegistry
from chains.ethereum import ethereum
from chains.base import base
from chains.bsc import bsc
from config import settings


registery = ChainRegistry([ethereum, base, bsc], settings.RPC_URLS)

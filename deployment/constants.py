from enum import IntEnum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, NamedTuple

from ape.utils import ZERO_ADDRESS  # noqa: F401

import deployment
from deployment.types import Token

#
# Filesystem
#

DEPLOYMENT_DIR = Path(deployment.__file__).parent
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Networks
#


class NetworkId(IntEnum):
    FUJI = 43113
    AVALANCHE = 43114


SUPPORTED_NETWORKS = [network_id.name for network_id in NetworkId]

# Network the deployment scripts resolve constants for unless told otherwise
DEFAULT_NETWORK = NetworkId.AVALANCHE

#
# Contracts
#

LIQUIDITY_POOL_MANAGER = "LiquidityPoolManager"
TREASURY_VESTER_CONTRACT = "TreasuryVester"

#
# Tokens
#

WAVAX = MappingProxyType(
    {
        NetworkId.FUJI: Token(
            NetworkId.FUJI,
            "0xd00ae08403B9bbb9124bB305C09058E32C39A48c",
            18,
            "WAVAX",
            "Wrapped AVAX",
        ),
        NetworkId.AVALANCHE: Token(
            NetworkId.AVALANCHE,
            "0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7",
            18,
            "WAVAX",
            "Wrapped AVAX",
        ),
    }
)

RADI = MappingProxyType(
    {
        NetworkId.FUJI: Token(
            NetworkId.FUJI,
            "0x600615234c0a427834A4344D10fEaCA374B2dfCB",
            18,
            "RADI",
            "RADI",
        ),
        NetworkId.AVALANCHE: Token(
            NetworkId.AVALANCHE,
            "0x9c5bBb5169B66773167d86818b3e149A4c7e1d1A",
            18,
            "RADI",
            "RADI",
        ),
    }
)

STABLE_TOKEN = MappingProxyType(
    {
        NetworkId.FUJI: Token(
            NetworkId.FUJI,
            "0x2058ec2791dD28b6f67DB836ddf87534F4Bbdf22",
            6,
            "FUJISTABLE",
            "The Fuji stablecoin",
        ),
        NetworkId.AVALANCHE: Token(
            NetworkId.AVALANCHE,
            "0xc7198437980c041c805A1EDcbA50c1Ce5db95118",
            18,
            "USDT",
            "USDT",
        ),
    }
)

#
# Treasury
#

TREASURY_VESTER = MappingProxyType(
    {
        NetworkId.FUJI: "0xe3f486d0401fC946aEB95539fACedf0016A342BB",
        NetworkId.AVALANCHE: "0x5720c005127AbB4Cad729B255C652BeD316cEd7e",
    }
)


class ConstantTable(NamedTuple):
    """Network-scoped addresses used as constructor arguments."""

    wavax: Mapping[NetworkId, Token]
    radi: Mapping[NetworkId, Token]
    stable_token: Mapping[NetworkId, Token]
    treasury_vester: Mapping[NetworkId, str]


CONSTANT_TABLE = ConstantTable(
    wavax=WAVAX,
    radi=RADI,
    stable_token=STABLE_TOKEN,
    treasury_vester=TREASURY_VESTER,
)

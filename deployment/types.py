from typing import NamedTuple, Optional


class Token(NamedTuple):
    """An ERC20 token as deployed on a single network."""

    chain_id: int
    address: str
    decimals: int
    symbol: str
    name: str


class DeploymentResult(NamedTuple):
    """Represents a confirmed contract deployment."""

    name: str
    address: str
    chain_id: Optional[int] = None
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    deployer: Optional[str] = None

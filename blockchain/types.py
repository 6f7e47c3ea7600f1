"""
Deployment Data Types
Records passed between the locator, builder and submitter stages
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract descriptor loaded from disk"""

    path: str
    contract_name: str  # File stem, e.g. "CarRentalSimple"
    bytecode: str  # 0x-prefixed creation bytecode
    abi: List[Dict[str, Any]] = field(default_factory=list)


class GasLimitSource(Enum):
    """Where a transaction's gas limit came from"""

    ESTIMATED = "estimated"
    DEFAULT = "default"


@dataclass(frozen=True)
class GasEstimate:
    """
    Outcome of a gas estimation attempt

    Either carries the node's estimate and the buffered limit derived from it,
    or marks the degraded path where the fixed default limit is used.
    """

    gas_limit: int
    source: GasLimitSource
    estimate: Optional[int] = None
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.source is GasLimitSource.DEFAULT


@dataclass
class DeploymentResult:
    """Outcome of a successful deployment"""

    contract_address: str
    transaction_hash: str
    artifact_path: str
    deployer_address: str
    gas_limit: int
    gas_limit_source: GasLimitSource
    gas_used: Optional[int] = None
    block_number: Optional[int] = None

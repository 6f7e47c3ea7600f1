"""
Deployer Configuration
Settings for a deployment run, read from the environment (.env supported)
"""

import os
import math
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv

from blockchain.artifact_locator import DEFAULT_ARTIFACTS_DIR, DEFAULT_PREFERRED_CONTRACTS
from blockchain.deployment_submitter import DEFAULT_POLL_LATENCY, DEFAULT_RECEIPT_TIMEOUT
from blockchain.exceptions import ConfigurationError
from utils.gas_calculator import DEFAULT_GAS_BUFFER_PERCENT, DEFAULT_GAS_LIMIT
from utils.rpc_manager import DEFAULT_REQUEST_TIMEOUT, DEFAULT_RPC_URL


@dataclass
class DeployerConfig:
    """Recognized deployer options"""

    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None  # None = Hardhat development key
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    preferred_contracts: Tuple[str, ...] = field(default=DEFAULT_PREFERRED_CONTRACTS)
    default_gas_limit: int = DEFAULT_GAS_LIMIT
    gas_buffer_percent: int = DEFAULT_GAS_BUFFER_PERCENT
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT
    poll_latency: float = DEFAULT_POLL_LATENCY
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeployerConfig":
        """
        Build configuration from environment variables

        Unset or empty variables take their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ after loading .env)

        Returns:
            DeployerConfig

        Raises:
            ConfigurationError: If a numeric setting is invalid
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        def get(name: str) -> Optional[str]:
            value = environ.get(name)
            if value is None or not value.strip():
                return None
            return value.strip()

        preferred = get('PREFERRED_CONTRACTS')

        return cls(
            rpc_url=get('RPC_URL') or DEFAULT_RPC_URL,
            private_key=get('PRIVATE_KEY'),
            artifacts_dir=get('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
            preferred_contracts=(
                tuple(name.strip() for name in preferred.split(',') if name.strip())
                if preferred else DEFAULT_PREFERRED_CONTRACTS
            ),
            default_gas_limit=_parse_positive(
                'DEFAULT_GAS_LIMIT', get('DEFAULT_GAS_LIMIT'), DEFAULT_GAS_LIMIT, int
            ),
            gas_buffer_percent=_parse_positive(
                'GAS_BUFFER_PERCENT', get('GAS_BUFFER_PERCENT'), DEFAULT_GAS_BUFFER_PERCENT, int
            ),
            receipt_timeout=_parse_positive(
                'RECEIPT_TIMEOUT', get('RECEIPT_TIMEOUT'), DEFAULT_RECEIPT_TIMEOUT, float
            ),
            request_timeout=_parse_positive(
                'RPC_REQUEST_TIMEOUT', get('RPC_REQUEST_TIMEOUT'), DEFAULT_REQUEST_TIMEOUT, float
            ),
        )


def _parse_positive(name: str, raw: Optional[str], default, cast):
    if raw is None:
        return default

    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e

    if math.isnan(value):
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")

    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")

    return value

"""
RPC Manager
Owns the single JSON-RPC connection used for a deployment run
"""

from web3 import Web3
from loguru import logger

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_REQUEST_TIMEOUT = 30


class RPCManager:
    """
    HTTP RPC connection for the deployer

    The connection is held for the whole process. A failed health check is
    only logged; the first real call reports the underlying error.
    """

    def __init__(self, rpc_url: str = DEFAULT_RPC_URL, request_timeout: float = DEFAULT_REQUEST_TIMEOUT):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP JSON-RPC endpoint
            request_timeout: Per-request HTTP timeout in seconds
        """
        self.rpc_url = rpc_url
        self.request_timeout = request_timeout
        self.w3 = None

    def connect(self) -> Web3:
        """Create the Web3 instance and check the endpoint"""
        self.w3 = Web3(Web3.HTTPProvider(
            self.rpc_url,
            request_kwargs={'timeout': self.request_timeout}
        ))

        if self.is_healthy():
            logger.success(f"Connected to RPC: {self.rpc_url}")
        else:
            logger.warning(f"RPC endpoint not reachable yet: {self.rpc_url}")

        return self.w3

    def get_web3(self) -> Web3:
        """
        Get the Web3 instance, connecting on first use

        Returns:
            Web3 instance
        """
        if self.w3 is None:
            return self.connect()
        return self.w3

    def is_healthy(self) -> bool:
        """
        Check if the endpoint answers

        Returns:
            True if connected
        """
        try:
            return bool(self.get_web3().is_connected())
        except Exception as e:
            logger.debug(f"RPC health check failed: {e}")
            return False


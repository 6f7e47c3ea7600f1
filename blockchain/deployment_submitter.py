"""
Deployment Submitter
Signs, broadcasts and confirms contract-creation transactions
"""

from typing import Any, Dict, Mapping, Optional, Tuple
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from .exceptions import DeploymentFailedError, NoReceiptError

DEFAULT_RECEIPT_TIMEOUT = 300
DEFAULT_POLL_LATENCY = 0.5


class DeploymentSubmitter:
    """
    Submits a deployment and blocks until it is mined

    The confirmation wait is bounded by receipt_timeout. Nothing is retried:
    any failure ends the deployment.
    """

    def __init__(
        self,
        w3: Web3,
        wallet_manager,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        poll_latency: float = DEFAULT_POLL_LATENCY
    ):
        """
        Initialize Deployment Submitter

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager that signs transactions
            receipt_timeout: Seconds to wait for the transaction to be mined
            poll_latency: Seconds between receipt polls
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.receipt_timeout = receipt_timeout
        self.poll_latency = poll_latency

    def deploy(self, transaction: Dict) -> Tuple[str, Mapping[str, Any], str]:
        """
        Sign, send and confirm a deployment transaction

        Args:
            transaction: Transaction dict from TransactionBuilder

        Returns:
            Tuple of (transaction hash, receipt, contract address)

        Raises:
            NoReceiptError: Wait ended without a receipt
            DeploymentFailedError: Signing, broadcast or wait failed, or the
                receipt shows no deployed contract
        """
        try:
            tx_hash = self.submit(transaction)
            receipt = self.wait_for_receipt(tx_hash)
        except (NoReceiptError, DeploymentFailedError):
            raise
        except Exception as e:
            raise DeploymentFailedError(f"Deployment transaction failed: {e}") from e

        if receipt.get('status') == 0:
            raise DeploymentFailedError(f"Deployment transaction reverted: {tx_hash}")

        contract_address = extract_contract_address(receipt)
        if not contract_address:
            raise DeploymentFailedError(
                f"Receipt for {tx_hash} has no contract address"
            )

        return tx_hash, receipt, contract_address

    def submit(self, transaction: Dict) -> str:
        """
        Sign and broadcast a transaction

        Returns:
            0x-prefixed transaction hash (accepted, not yet mined)
        """
        logger.info("Sending deployment transaction...")

        signed_tx = self.wallet_manager.sign_transaction(transaction)
        tx_hash = Web3.to_hex(self.w3.eth.send_raw_transaction(signed_tx.raw_transaction))

        logger.info(f"tx hash: {tx_hash}")
        return tx_hash

    def wait_for_receipt(self, tx_hash: str) -> Mapping[str, Any]:
        """
        Block until the transaction is mined

        Args:
            tx_hash: Transaction hash

        Returns:
            Transaction receipt

        Raises:
            NoReceiptError: Not mined within receipt_timeout, or no receipt returned
        """
        logger.info(f"Waiting for confirmation (timeout {self.receipt_timeout}s)...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.receipt_timeout,
                poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            raise NoReceiptError(
                f"No receipt received for {tx_hash} within {self.receipt_timeout}s"
            ) from e

        if not receipt:
            raise NoReceiptError(f"No receipt received for {tx_hash}")

        logger.debug(f"Mined in block {receipt.get('blockNumber')}, gas used {receipt.get('gasUsed')}")
        return receipt


def extract_contract_address(receipt: Mapping[str, Any]) -> Optional[str]:
    """Deployed address from a receipt, falling back to the 'creates' field"""
    return receipt.get('contractAddress') or receipt.get('creates')

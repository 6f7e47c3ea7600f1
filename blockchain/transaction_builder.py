"""
Transaction Builder
Assembles contract-creation transactions from a compiled artifact
"""

from typing import Dict
from web3 import Web3
from loguru import logger

from .types import ContractArtifact, GasEstimate


class TransactionBuilder:
    """
    Builds deployment transactions for the deployer wallet

    Constructor arguments are not encoded: the artifact bytecode is sent
    as-is, so the contract must have a no-argument constructor.
    """

    def __init__(self, w3: Web3, wallet_manager, gas_calculator):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager holding the deployer account
            gas_calculator: Gas limit estimator
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.gas_calculator = gas_calculator

        # Outcome of the last estimation, for reporting
        self.last_gas_estimate = None

    def build_deployment_tx(self, artifact: ContractArtifact) -> Dict:
        """
        Build a signed-ready contract-creation transaction

        Args:
            artifact: Artifact whose bytecode is deployed

        Returns:
            Transaction dict

        Raises:
            Exception: Network errors from fee, chain id or nonce lookups
        """
        deployer = self.wallet_manager.deployer_address

        gas_estimate = self.gas_calculator.estimate_deployment_gas(deployer, artifact.bytecode)
        self._log_gas_estimate(gas_estimate)
        self.last_gas_estimate = gas_estimate

        tx = {
            'from': deployer,
            'data': artifact.bytecode,
            'value': 0,
            'gas': gas_estimate.gas_limit,
            'chainId': self.w3.eth.chain_id
        }
        tx.update(self.gas_calculator.get_fee_params())

        # Fetched last to keep the window against other senders small
        tx['nonce'] = self.w3.eth.get_transaction_count(deployer)
        logger.debug(f"Deployment nonce: {tx['nonce']}")

        return tx

    def _log_gas_estimate(self, gas_estimate: GasEstimate):
        if gas_estimate.degraded:
            logger.warning(
                f"estimateGas failed ({gas_estimate.error}), "
                f"using default gasLimit: {gas_estimate.gas_limit}"
            )
        else:
            logger.info(
                f"Estimated gas: {gas_estimate.estimate}, "
                f"using gasLimit: {gas_estimate.gas_limit}"
            )

"""
Contract Deployer - Core orchestration logic
Locates the artifact, builds the creation transaction and confirms it on-chain
"""

from typing import Optional
from web3 import Web3

from blockchain.artifact_locator import ArtifactLocator
from blockchain.deployment_submitter import DeploymentSubmitter
from blockchain.transaction_builder import TransactionBuilder
from blockchain.types import ContractArtifact, DeploymentResult

from utils.gas_calculator import GasCalculator
from utils.rpc_manager import RPCManager

from .config import DeployerConfig
from .wallet_manager import WalletManager


class ContractDeployer:
    """
    Deploys one compiled contract

    Stages run strictly in order and each failure aborts the run:
    artifact discovery happens before any network access.
    """

    def __init__(self, config: Optional[DeployerConfig] = None, w3: Optional[Web3] = None):
        """
        Initialize Contract Deployer

        Args:
            config: Deployer configuration (defaults to environment)
            w3: Web3 instance to use instead of connecting to config.rpc_url
        """
        self.config = config if config is not None else DeployerConfig.from_env()
        self.rpc_manager = RPCManager(self.config.rpc_url, self.config.request_timeout)
        self.w3 = w3

        self.artifact_locator = ArtifactLocator(
            self.config.artifacts_dir,
            self.config.preferred_contracts
        )

    def deploy(self) -> DeploymentResult:
        """
        Run a full deployment

        Returns:
            DeploymentResult for the mined contract

        Raises:
            DeploymentError: Any fatal stage failure
        """
        artifact = self.artifact_locator.locate()
        return self.deploy_artifact(artifact)

    def deploy_artifact(self, artifact: ContractArtifact) -> DeploymentResult:
        """
        Deploy an already-loaded artifact

        Args:
            artifact: Artifact to deploy

        Returns:
            DeploymentResult
        """
        if self.w3 is None:
            self.w3 = self.rpc_manager.get_web3()

        wallet_manager = WalletManager(self.config.private_key)
        gas_calculator = GasCalculator(
            self.w3,
            self.config.default_gas_limit,
            self.config.gas_buffer_percent
        )
        tx_builder = TransactionBuilder(self.w3, wallet_manager, gas_calculator)
        submitter = DeploymentSubmitter(
            self.w3,
            wallet_manager,
            receipt_timeout=self.config.receipt_timeout,
            poll_latency=self.config.poll_latency
        )

        transaction = tx_builder.build_deployment_tx(artifact)
        tx_hash, receipt, contract_address = submitter.deploy(transaction)

        return DeploymentResult(
            contract_address=contract_address,
            transaction_hash=tx_hash,
            artifact_path=artifact.path,
            deployer_address=wallet_manager.deployer_address,
            gas_limit=transaction['gas'],
            gas_limit_source=tx_builder.last_gas_estimate.source,
            gas_used=receipt.get('gasUsed'),
            block_number=receipt.get('blockNumber')
        )

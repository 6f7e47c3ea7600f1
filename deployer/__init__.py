"""
Contract Deployer Core Package
Handles deployment orchestration, configuration and the deployer wallet
"""

from .deployer_engine import ContractDeployer
from .config import DeployerConfig
from .wallet_manager import WalletManager

__all__ = ['ContractDeployer', 'DeployerConfig', 'WalletManager']

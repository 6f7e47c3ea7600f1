"""
Wallet Manager
Holds the deployer signing identity
"""

from typing import Dict, Optional
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger

# Hardhat node account #0. Publicly known: only for local development networks.
DEFAULT_DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEFAULT_DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class WalletManager:
    """
    Deployer wallet derived from a private key

    Falls back to the Hardhat development key when no key is given.
    """

    def __init__(self, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            private_key: Hex private key (None or empty = development key)
        """
        self.using_default_key = not private_key
        self.deployer_private_key = private_key or DEFAULT_DEV_PRIVATE_KEY

        self.deployer_account = Account.from_key(self.deployer_private_key)
        self.deployer_address = self.deployer_account.address

        if self.using_default_key:
            logger.warning("PRIVATE_KEY not set, using Hardhat development key")
        logger.info(f"Using deployer: {self.deployer_address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.deployer_account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_deployer_balance(self, w3: Web3) -> Decimal:
        """
        Get deployer native balance

        Args:
            w3: Web3 instance

        Returns:
            Balance in ether units
        """
        balance_wei = w3.eth.get_balance(self.deployer_address)
        return Decimal(str(Web3.from_wei(balance_wei, 'ether')))

"""
Gas Calculator
Gas limit estimation with a fixed-default fallback for deployment transactions
"""

from typing import Dict
from web3 import Web3
from loguru import logger

from blockchain.types import GasEstimate, GasLimitSource

DEFAULT_GAS_LIMIT = 6_000_000
DEFAULT_GAS_BUFFER_PERCENT = 120


class GasCalculator:
    """
    Derives gas limits for contract creation

    A successful estimate is padded by a percentage buffer to absorb
    estimation variance. A failed estimate is not retried; the caller gets
    the fixed default limit and a degraded marker instead.
    """

    def __init__(
        self,
        w3: Web3,
        default_gas_limit: int = DEFAULT_GAS_LIMIT,
        gas_buffer_percent: int = DEFAULT_GAS_BUFFER_PERCENT
    ):
        """
        Initialize Gas Calculator

        Args:
            w3: Web3 instance
            default_gas_limit: Gas limit used when estimation fails
            gas_buffer_percent: Limit as a percentage of the estimate (120 = +20%)
        """
        self.w3 = w3
        self.default_gas_limit = default_gas_limit
        self.gas_buffer_percent = gas_buffer_percent

        logger.debug(
            f"Gas Calculator initialized - default limit: {default_gas_limit}, "
            f"buffer: {gas_buffer_percent}%"
        )

    def estimate_deployment_gas(self, sender: str, data: str) -> GasEstimate:
        """
        Estimate gas for a contract-creation transaction

        Args:
            sender: Deployer address
            data: Creation bytecode

        Returns:
            GasEstimate with the buffered limit, or the default limit if the
            node could not estimate
        """
        try:
            estimate = int(self.w3.eth.estimate_gas({'from': sender, 'data': data}))
        except Exception as e:
            return GasEstimate(
                gas_limit=self.default_gas_limit,
                source=GasLimitSource.DEFAULT,
                error=str(e) or e.__class__.__name__
            )

        return GasEstimate(
            gas_limit=self.apply_buffer(estimate),
            source=GasLimitSource.ESTIMATED,
            estimate=estimate
        )

    def apply_buffer(self, estimate: int) -> int:
        """Buffered gas limit, rounded down"""
        return estimate * self.gas_buffer_percent // 100

    def get_gas_price(self) -> int:
        """Current network gas price in wei"""
        return int(self.w3.eth.gas_price)

    def get_fee_params(self) -> Dict[str, int]:
        """
        Legacy fee fields for a transaction

        Returns:
            Dict with gasPrice in wei
        """
        gas_price = self.get_gas_price()
        logger.debug(f"Gas price: {Web3.from_wei(gas_price, 'gwei')} gwei")

        return {'gasPrice': gas_price}

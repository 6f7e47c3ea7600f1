"""
Utilities Package
RPC connection and gas estimation helpers
"""

from .gas_calculator import GasCalculator
from .rpc_manager import RPCManager

__all__ = [
    'GasCalculator',
    'RPCManager'
]

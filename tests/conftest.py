"""
Shared fixtures for deployer tests
"""

import json
from unittest.mock import Mock

import pytest
from loguru import logger

from deployer.config import DeployerConfig


CONTRACT_ADDRESS = "0xABC0000000000000000000000000000000000001"
TX_HASH_BYTES = b'\x12' * 32


@pytest.fixture
def artifacts_dir(tmp_path):
    """Empty artifacts/contracts root"""
    root = tmp_path / "artifacts" / "contracts"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_artifact(artifacts_dir):
    """Factory writing <root>/<source>/<name> with the given bytecode"""

    def _write(source, name, bytecode="0x6001", abi=None, **extra):
        folder = artifacts_dir / source
        folder.mkdir(parents=True, exist_ok=True)

        artifact = {'abi': abi if abi is not None else [], 'bytecode': bytecode}
        artifact.update(extra)

        path = folder / name
        path.write_text(json.dumps(artifact))
        return path

    return _write


@pytest.fixture
def receipt():
    """Successful deployment receipt"""
    return {
        'status': 1,
        'contractAddress': CONTRACT_ADDRESS,
        'gasUsed': 95000,
        'blockNumber': 1
    }


@pytest.fixture
def w3(receipt):
    """Mock Web3 simulating a local development node"""
    w3 = Mock()
    w3.eth.chain_id = 31337
    w3.eth.gas_price = 1_000_000_000
    w3.eth.estimate_gas.return_value = 100000
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.send_raw_transaction.return_value = TX_HASH_BYTES
    w3.eth.wait_for_transaction_receipt.return_value = receipt
    w3.eth.get_balance.return_value = 10 ** 18
    w3.eth.block_number = 1
    return w3


@pytest.fixture
def config(artifacts_dir):
    """Configuration pointing at the temporary artifacts root"""
    return DeployerConfig(artifacts_dir=str(artifacts_dir), receipt_timeout=5)


@pytest.fixture
def log_messages():
    """Capture loguru messages"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record['message']), level="DEBUG")
    yield messages
    logger.remove(handler_id)

"""
Unit Tests for Deployment Submission and Confirmation
"""

import pytest
from web3.exceptions import TimeExhausted

from blockchain.deployment_submitter import DeploymentSubmitter, extract_contract_address
from blockchain.exceptions import DeploymentFailedError, NoReceiptError
from deployer.wallet_manager import DEFAULT_DEV_ADDRESS, WalletManager

CONTRACT_ADDRESS = "0xABC0000000000000000000000000000000000001"
TX_HASH = "0x" + "12" * 32


@pytest.fixture
def transaction():
    """Built deployment transaction"""
    return {
        'from': DEFAULT_DEV_ADDRESS,
        'data': "0x6002",
        'value': 0,
        'gas': 120000,
        'chainId': 31337,
        'gasPrice': 1_000_000_000,
        'nonce': 0
    }


@pytest.fixture
def submitter(w3):
    """Submitter signing with the development key"""
    return DeploymentSubmitter(w3, WalletManager(), receipt_timeout=5, poll_latency=0.01)


class TestSubmission:
    """Test signing and broadcast"""

    def test_submit_returns_hex_hash(self, w3, submitter, transaction):
        """Signed raw transaction is broadcast"""
        tx_hash = submitter.submit(transaction)

        assert tx_hash == TX_HASH
        raw = w3.eth.send_raw_transaction.call_args[0][0]
        assert isinstance(raw, (bytes, bytearray)) and len(raw) > 0

    def test_deploy_happy_path(self, w3, submitter, transaction, receipt):
        """Hash, receipt and address returned"""
        tx_hash, mined, address = submitter.deploy(transaction)

        assert tx_hash == TX_HASH
        assert mined == receipt
        assert address == CONTRACT_ADDRESS
        w3.eth.wait_for_transaction_receipt.assert_called_once_with(
            TX_HASH, timeout=5, poll_latency=0.01
        )

    def test_broadcast_failure(self, w3, submitter, transaction):
        """Node rejection becomes DeploymentFailedError"""
        w3.eth.send_raw_transaction.side_effect = ValueError("insufficient funds for gas")

        with pytest.raises(DeploymentFailedError, match="insufficient funds") as exc_info:
            submitter.deploy(transaction)

        assert isinstance(exc_info.value.__cause__, ValueError)
        w3.eth.wait_for_transaction_receipt.assert_not_called()

    def test_signing_failure(self, w3, submitter, transaction):
        """Mismatched sender cannot be signed"""
        transaction['from'] = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

        with pytest.raises(DeploymentFailedError):
            submitter.deploy(transaction)

        w3.eth.send_raw_transaction.assert_not_called()


class TestConfirmation:
    """Test waiting for the receipt"""

    def test_no_receipt(self, w3, submitter, transaction):
        """Empty wait result is fatal"""
        w3.eth.wait_for_transaction_receipt.return_value = None

        with pytest.raises(NoReceiptError):
            submitter.deploy(transaction)

    def test_wait_timeout(self, w3, submitter, transaction):
        """Bounded wait that expires reports no receipt"""
        w3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("not mined")

        with pytest.raises(NoReceiptError, match="within 5s"):
            submitter.deploy(transaction)

    def test_wait_failure(self, w3, submitter, transaction):
        """Other wait errors are generic deployment failures"""
        w3.eth.wait_for_transaction_receipt.side_effect = ConnectionError("connection reset")

        with pytest.raises(DeploymentFailedError, match="connection reset"):
            submitter.deploy(transaction)

    def test_reverted_deployment(self, w3, submitter, transaction, receipt):
        """Status 0 receipt is a failed deployment"""
        receipt['status'] = 0

        with pytest.raises(DeploymentFailedError, match="reverted"):
            submitter.deploy(transaction)

    def test_receipt_without_address(self, w3, submitter, transaction, receipt):
        """Receipt with no created contract is a failed deployment"""
        receipt['contractAddress'] = None

        with pytest.raises(DeploymentFailedError, match="no contract address"):
            submitter.deploy(transaction)


class TestExtractContractAddress:
    """Test receipt address lookup"""

    def test_primary_field(self):
        assert extract_contract_address({'contractAddress': CONTRACT_ADDRESS}) == CONTRACT_ADDRESS

    def test_creates_fallback(self):
        assert extract_contract_address({'contractAddress': None, 'creates': CONTRACT_ADDRESS}) == CONTRACT_ADDRESS
        assert extract_contract_address({'creates': CONTRACT_ADDRESS}) == CONTRACT_ADDRESS

    def test_missing(self):
        assert extract_contract_address({'status': 1}) is None


if __name__ == "__main__":
    pytest.main([__file__, '-v'])

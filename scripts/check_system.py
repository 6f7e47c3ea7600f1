"""
System Check Script
Verifies configuration, artifacts and RPC access before deploying

Usage (from the repository root): python -m scripts.check_system
"""

import sys
from loguru import logger

from blockchain.artifact_locator import ArtifactLocator
from blockchain.exceptions import DeploymentError
from deployer.config import DeployerConfig
from deployer.wallet_manager import WalletManager
from utils.rpc_manager import RPCManager

MIN_DEPLOYER_BALANCE = 0.01


def check_environment_variables(config: DeployerConfig):
    """Report which settings fall back to defaults"""
    logger.info("Checking environment variables...")

    if config.private_key is None:
        logger.warning("  PRIVATE_KEY not set - using Hardhat development key")
        logger.warning("  Only use this key on a local development network")
    else:
        logger.success("  ✓ PRIVATE_KEY set")

    logger.info(f"  RPC_URL: {config.rpc_url}")
    logger.info(f"  ARTIFACTS_DIR: {config.artifacts_dir}")
    return True


def check_artifacts(config: DeployerConfig):
    """Check that a deployable artifact can be found"""
    logger.info("Checking contract artifacts...")

    locator = ArtifactLocator(config.artifacts_dir, config.preferred_contracts)
    try:
        artifact = locator.locate()
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        return False

    size = (len(artifact.bytecode) - 2) // 2
    logger.success(f"  ✓ {artifact.contract_name}: {size} bytes of bytecode")
    return True


def check_rpc_connection(config: DeployerConfig, w3=None):
    """Check the RPC endpoint answers"""
    logger.info("Checking RPC connection...")

    if w3 is None:
        rpc_manager = RPCManager(config.rpc_url, config.request_timeout)
        if not rpc_manager.is_healthy():
            logger.error(f"  ✗ {config.rpc_url}: Connection failed")
            return False
        w3 = rpc_manager.get_web3()

    try:
        chain_id = w3.eth.chain_id
        block = w3.eth.block_number
    except Exception as e:
        logger.error(f"  ✗ {config.rpc_url}: {e}")
        return False

    logger.success(f"  ✓ Connected (chain id: {chain_id}, block: {block})")
    return True


def check_deployer_balance(config: DeployerConfig, w3=None):
    """Check the deployer can pay for gas"""
    logger.info("Checking deployer balance...")

    wallet_manager = WalletManager(config.private_key)
    if w3 is None:
        w3 = RPCManager(config.rpc_url, config.request_timeout).get_web3()

    try:
        balance = wallet_manager.get_deployer_balance(w3)
    except Exception as e:
        logger.error(f"  Error checking deployer balance: {e}")
        return False

    logger.info(f"  Deployer: {balance:.4f} ETH")

    if balance < MIN_DEPLOYER_BALANCE:
        logger.warning(f"  ⚠ Deployer balance low (need at least {MIN_DEPLOYER_BALANCE} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main(config: DeployerConfig = None, w3=None):
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    try:
        if config is None:
            config = DeployerConfig.from_env()
    except DeploymentError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    checks = [
        ("Environment Variables", lambda: check_environment_variables(config), True),
        ("Contract Artifacts", lambda: check_artifacts(config), True),
        ("RPC Connection", lambda: check_rpc_connection(config, w3), True),
        ("Deployer Balance", lambda: check_deployer_balance(config, w3), False)
    ]

    results = []

    for name, check_func, required in checks:
        logger.info("")
        try:
            result = check_func()
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            result = False
        results.append((name, result, required))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    for name, result, required in results:
        if result:
            status = "✓ PASS"
        elif required:
            status = "✗ FAIL"
        else:
            status = "⚠ WARN"
        logger.info(f"  {status}: {name}")

    passed = sum(1 for _, result, _ in results if result)
    logger.info("")
    logger.info(f"Total: {passed}/{len(results)} checks passed")

    if all(result for _, result, required in results if required):
        logger.success("✅ Ready to deploy")
        logger.info("Deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())

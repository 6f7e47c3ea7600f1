"""
Contract Deployer - Main Entry Point
Deploys the compiled contract found under artifacts/contracts
"""

import os
import sys
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import DeploymentError
from deployer.config import DeployerConfig
from deployer.deployer_engine import ContractDeployer

FRONTEND_HINT = "Paste this address into frontend/index.html -> CONTRACT_ADDRESS"


def configure_logging():
    """Console sink, plus a rotating file sink when LOG_FILE is set"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=os.getenv('LOG_LEVEL') or "INFO"
    )

    log_file = os.getenv('LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def main(config: DeployerConfig = None, w3=None) -> int:
    """
    Run one deployment

    Returns:
        Process exit code (0 on success)
    """
    try:
        if config is None:
            config = DeployerConfig.from_env()

        result = ContractDeployer(config, w3=w3).deploy()

    except DeploymentError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Deployment interrupted")
        return 1
    except Exception as e:
        logger.error(f"Deployment error: {e}")
        return 1

    logger.info(f"Contract deployed at: {result.contract_address}")
    logger.info(FRONTEND_HINT)
    return 0


def run():
    """Console script entry point"""
    load_dotenv()
    configure_logging()

    logger.info("=" * 70)
    logger.info("Contract Deployment")
    logger.info("=" * 70)

    sys.exit(main())


if __name__ == "__main__":
    run()

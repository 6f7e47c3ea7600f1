"""
Blockchain Interaction Package
Handles artifact discovery, transaction building and deployment submission
"""

from .artifact_locator import ArtifactLocator
from .transaction_builder import TransactionBuilder
from .deployment_submitter import DeploymentSubmitter

__all__ = ['ArtifactLocator', 'TransactionBuilder', 'DeploymentSubmitter']

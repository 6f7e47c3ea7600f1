"""
Deployment Exceptions
Error taxonomy for artifact discovery and contract deployment
"""


class DeploymentError(Exception):
    """Base exception for deployment errors"""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when an environment setting cannot be parsed"""

    pass


class ArtifactsMissingError(DeploymentError, FileNotFoundError):
    """Raised when the artifacts directory does not exist (compile step never ran)"""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no usable JSON artifact is found under the artifacts directory"""

    pass


class EmptyBytecodeError(DeploymentError, ValueError):
    """Raised when the selected artifact carries no creation bytecode"""

    pass


class NoReceiptError(DeploymentError, TimeoutError):
    """Raised when the confirmation wait ends without a receipt"""

    pass


class DeploymentFailedError(DeploymentError, RuntimeError):
    """Raised when signing, broadcasting or confirming the deployment fails"""

    pass

"""
Artifact Locator
Finds the compiled contract artifact under artifacts/contracts/<source>/<name>.json
"""

import os
import json
from typing import Dict, List, Optional, Sequence
from loguru import logger

from .exceptions import ArtifactNotFoundError, ArtifactsMissingError, EmptyBytecodeError
from .types import ContractArtifact

DEFAULT_ARTIFACTS_DIR = os.path.join("artifacts", "contracts")
DEFAULT_PREFERRED_CONTRACTS = ("carrentalsimple", "smartrental")

# Hardhat writes a debug sidecar next to each artifact
DEBUG_SUFFIX = ".dbg.json"
EMPTY_CODE = "0x"


class ArtifactLocator:
    """
    Scans a Hardhat-style artifacts tree for one deployable contract

    The first source directory that holds any JSON artifact wins. Inside it,
    a file whose name contains one of the preferred fragments is picked over
    the others, otherwise the first file in listing order.
    """

    def __init__(
        self,
        artifacts_dir: str = DEFAULT_ARTIFACTS_DIR,
        preferred_contracts: Sequence[str] = DEFAULT_PREFERRED_CONTRACTS
    ):
        """
        Initialize Artifact Locator

        Args:
            artifacts_dir: Root directory with one subdirectory per source file
            preferred_contracts: Case-insensitive contract name fragments to prefer
        """
        self.artifacts_dir = artifacts_dir
        self.preferred_contracts = [name.lower() for name in preferred_contracts if name]

    def locate(self) -> ContractArtifact:
        """
        Locate and load the artifact to deploy

        Returns:
            Loaded contract artifact

        Raises:
            ArtifactsMissingError: Artifacts directory does not exist
            ArtifactNotFoundError: No JSON artifact in any subdirectory
            EmptyBytecodeError: Selected artifact has no creation bytecode
        """
        artifact_path = self.find_artifact_path()
        logger.info(f"Using artifact: {artifact_path}")

        return self.load_artifact(artifact_path)

    def find_artifact_path(self) -> str:
        """Return the path of the artifact to deploy"""
        if not os.path.isdir(self.artifacts_dir):
            raise ArtifactsMissingError(
                f"Artifacts directory not found: {self.artifacts_dir}. "
                "Run: npx hardhat compile"
            )

        for folder in self._list_subdirectories():
            files = self._list_json_files(folder)
            if not files:
                continue

            chosen = self._select_candidate(files)
            logger.debug(f"Found {len(files)} artifact(s) in {folder}, selected {chosen}")
            return os.path.join(folder, chosen)

        raise ArtifactNotFoundError(
            f"No contract artifact found under {self.artifacts_dir}. "
            "Run: npx hardhat compile"
        )

    def load_artifact(self, artifact_path: str) -> ContractArtifact:
        """
        Parse an artifact file and validate its bytecode

        Args:
            artifact_path: Path to artifact JSON

        Returns:
            Loaded contract artifact
        """
        try:
            with open(artifact_path, 'r', encoding='utf-8') as f:
                artifact_json = json.load(f)
        except (OSError, ValueError) as e:
            raise ArtifactNotFoundError(
                f"Could not read artifact {artifact_path}: {e}"
            ) from e

        if not isinstance(artifact_json, dict):
            raise ArtifactNotFoundError(f"Artifact is not a JSON object: {artifact_path}")

        bytecode = extract_bytecode(artifact_json)
        if not bytecode or bytecode == EMPTY_CODE:
            raise EmptyBytecodeError(f"Bytecode missing in artifact: {artifact_path}")

        contract_name = os.path.basename(artifact_path)[:-len(".json")]

        return ContractArtifact(
            path=artifact_path,
            contract_name=artifact_json.get('contractName') or contract_name,
            bytecode=bytecode,
            abi=artifact_json.get('abi') or []
        )

    def _list_subdirectories(self) -> List[str]:
        """Immediate subdirectories of the root, in listing order"""
        with os.scandir(self.artifacts_dir) as entries:
            return [entry.path for entry in entries if entry.is_dir()]

    def _list_json_files(self, folder: str) -> List[str]:
        """Artifact file names in a folder, in listing order"""
        with os.scandir(folder) as entries:
            return [
                entry.name
                for entry in entries
                if entry.is_file()
                and entry.name.endswith(".json")
                and not entry.name.endswith(DEBUG_SUFFIX)
            ]

    def _select_candidate(self, files: List[str]) -> str:
        """Pick a preferred contract if present, else the first file"""
        for file_name in files:
            lowered = file_name.lower()
            if any(fragment in lowered for fragment in self.preferred_contracts):
                return file_name

        return files[0]


def extract_bytecode(artifact_json: Dict) -> Optional[str]:
    """
    Get creation bytecode from a Hardhat or Foundry artifact

    Hardhat stores a hex string under "bytecode"; Foundry nests it under
    "bytecode.object", sometimes without the 0x prefix.
    """
    bytecode = artifact_json.get('bytecode')

    if isinstance(bytecode, dict):
        bytecode = bytecode.get('object')

    if not isinstance(bytecode, str):
        return None

    bytecode = bytecode.strip()
    if bytecode and not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    return bytecode

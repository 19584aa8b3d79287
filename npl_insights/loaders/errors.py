from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class DatasetLoadError(Exception):
    """Raised when a dataset file cannot be read.

    The API maps these to 503 and the CLI to a non-zero exit, keeping the
    machine-readable ``code`` for clients.
    """

    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


# Error codes
DATASET_NOT_FOUND = "DATASET_NOT_FOUND"
DATASET_UNREADABLE = "DATASET_UNREADABLE"
DATASETS_NOT_LOADED = "DATASETS_NOT_LOADED"

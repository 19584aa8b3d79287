"""
Process-wide dataset cache, loaded once at startup
"""
import logging
from typing import Optional

from fastapi import HTTPException

from npl_insights.loaders import DatasetBundle, load_datasets
from npl_insights.loaders.errors import DATASETS_NOT_LOADED

logger = logging.getLogger(__name__)

_datasets: Optional[DatasetBundle] = None


def init_datasets(data_dir: Optional[str] = None) -> DatasetBundle:
    """Load every table and keep it for the lifetime of the process"""
    global _datasets
    _datasets = load_datasets(data_dir)
    logger.info(
        "Datasets ready: %d master rows, %d match outcomes",
        len(_datasets.master),
        len(_datasets.match_outcomes),
    )
    return _datasets


def set_datasets(bundle: Optional[DatasetBundle]) -> None:
    global _datasets
    _datasets = bundle


def get_datasets() -> DatasetBundle:
    """FastAPI dependency - the loaded bundle, or 503 before a successful load"""
    if _datasets is None:
        raise HTTPException(
            status_code=503,
            detail={"code": DATASETS_NOT_LOADED, "message": "Datasets are not loaded"},
        )
    return _datasets

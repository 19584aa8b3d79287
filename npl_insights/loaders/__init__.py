from npl_insights.loaders.csv_loader import DatasetBundle, load_datasets
from npl_insights.loaders.errors import DatasetLoadError

__all__ = ["DatasetBundle", "load_datasets", "DatasetLoadError"]

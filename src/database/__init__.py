from .models import CandidateRecord, MovableAssets, ImmovableAssets, CriminalCaseDetail, ItrDetails
from .dataset import Dataset, DataSourceError, load_dataset, read_source, get_dataset

__all__ = [
    "CandidateRecord",
    "MovableAssets",
    "ImmovableAssets",
    "CriminalCaseDetail",
    "ItrDetails",
    "Dataset",
    "DataSourceError",
    "load_dataset",
    "read_source",
    "get_dataset",
]

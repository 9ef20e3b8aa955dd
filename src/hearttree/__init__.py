# hearttree/__init__.py
"""
hearttree: decision-tree accuracy report for a tabular CSV dataset.

Exports:
    - load_dataset, shape_dataset, Dataset
    - split_with_ratio, Split
    - TreeClassifier, fit_model, predict
    - evaluate, Evaluation
    - run_pipeline, PipelineConfig
"""
from .config import PipelineConfig, SplitConfig, TreeParams
from .dataset import Dataset, load_dataset, shape_dataset
from .evaluate import Evaluation, evaluate
from .parser import read_records
from .partition import Split, split_with_ratio
from .pipeline import PipelineResult, run_pipeline
from .tree import TreeClassifier, fit_model, predict

__all__ = [
    "Dataset", "Evaluation", "PipelineConfig", "PipelineResult", "Split",
    "SplitConfig", "TreeClassifier", "TreeParams", "evaluate", "fit_model",
    "load_dataset", "predict", "read_records", "run_pipeline", "shape_dataset",
    "split_with_ratio",
]
__version__ = "0.1.0"

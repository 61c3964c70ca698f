from .app_config import AppConfig
from .log_config import LogConfig
from .model_config import ModelConfig
from .data_config import DataConfig
from .predict_config import PredictConfig

__all__ = [
    "AppConfig",
    "LogConfig",
    "ModelConfig",
    "DataConfig",
    "PredictConfig",
]

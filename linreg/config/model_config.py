#!filepath: linreg/config/model_config.py
from typing import Optional

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    Hyperparameters for LinearRegressionModel.

    seed=None → unseeded generator (non-deterministic shuffle).
    """

    epochs: int = Field(default=1000, ge=0)
    learning_rate: float = 0.01
    seed: Optional[int] = None

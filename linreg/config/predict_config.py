# linreg/config/predict_config.py
from pydantic import BaseModel


class PredictConfig(BaseModel):
    """
    Sweep used by `linreg run` (predict_range) and the display threshold
    shared with `linreg evaluate` (predict_all).
    """

    start: float = -10.0
    end: float = 10.0
    step: float = 0.5
    threshold: float = 0.001

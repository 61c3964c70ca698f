#!filepath: linreg/config/data_config.py
from pydantic import BaseModel


class DataConfig(BaseModel):
    training_file: str = "data/data.txt"

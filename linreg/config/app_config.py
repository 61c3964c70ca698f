#!filepath: linreg/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .data_config import DataConfig
from .model_config import ModelConfig
from .predict_config import PredictConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    linreg/config/app_config.py → linreg/config → linreg → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


# env var → (section, key)
_ENV_OVERRIDES = {
    "LINREG_TRAINING_FILE": ("data", "training_file"),
    "LINREG_LOG_LEVEL": ("log", "level"),
    "LINREG_SEED": ("model", "seed"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    predict: PredictConfig = Field(default_factory=PredictConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 linreg/config/base.yml
        - 不依赖当前工作目录
        - LINREG_* 环境变量覆盖 YAML 中的对应字段
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入覆盖项
        for env_name, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                raw.setdefault(section, {})
                raw[section][key] = value

        return cls(**raw)

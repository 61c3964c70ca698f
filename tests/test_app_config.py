#!filepath: tests/test_app_config.py
import yaml
import pytest
from pydantic import ValidationError

from linreg.config import AppConfig
from linreg.config.log_config import LogConfig
from linreg.config.model_config import ModelConfig
from linreg.config.data_config import DataConfig
from linreg.config.predict_config import PredictConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG",
        },
        "model": {
            "epochs": 200,
            "learning_rate": 0.05,
            "seed": 42,
        },
        "data": {
            "training_file": "train.txt",
        },
        "predict": {
            "start": 0,
            "end": 5,
            "step": 1,
            "threshold": 0.01,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.model, ModelConfig)
    assert isinstance(cfg.data, DataConfig)
    assert isinstance(cfg.predict, PredictConfig)


def test_values_are_read(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"
    assert cfg.model.epochs == 200
    assert cfg.model.learning_rate == 0.05
    assert cfg.model.seed == 42
    assert cfg.data.training_file == "train.txt"
    assert cfg.predict.step == 1.0
    assert cfg.predict.threshold == 0.01


def test_packaged_defaults():
    cfg = AppConfig.load()

    assert cfg.model.epochs == 1000
    assert cfg.model.learning_rate == 0.01
    assert cfg.model.seed is None
    assert cfg.log.dir is None
    assert (cfg.predict.start, cfg.predict.end, cfg.predict.step) == (-10.0, 10.0, 0.5)
    assert cfg.predict.threshold == 0.001


def test_missing_sections_use_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"model": {"epochs": 5}}))

    cfg = AppConfig.load(path=str(f))

    assert cfg.model.epochs == 5
    assert cfg.model.learning_rate == 0.01
    assert cfg.data.training_file == "data/data.txt"


def test_env_overrides(sample_config_file, monkeypatch):
    monkeypatch.setenv("LINREG_SEED", "7")
    monkeypatch.setenv("LINREG_TRAINING_FILE", "other.txt")
    monkeypatch.setenv("LINREG_LOG_LEVEL", "WARNING")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.model.seed == 7
    assert cfg.data.training_file == "other.txt"
    assert cfg.log.level == "WARNING"


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


def test_invalid_field_should_fail(tmp_path):
    """字段类型错误时，AppConfig 应该抛出 ValidationError"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"model": {"epochs": -1, "learning_rate": "fast"}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))

#!filepath: linreg/cli.py
import sys
from typing import Optional

import typer
from rich import print

from linreg import AppConfig, LinearRegressionModel, logs, __version__

app = typer.Typer(help="Single-feature linear regression CLI")


def _load_config(
    config: Optional[str],
    data_file: Optional[str],
    epochs: Optional[int],
    learning_rate: Optional[float],
    seed: Optional[int],
) -> AppConfig:
    cfg = AppConfig.load(path=config)
    logs.apply(cfg.log)

    # 命令行参数优先于 YAML / env
    if data_file is not None:
        cfg.data.training_file = data_file
    if epochs is not None:
        cfg.model.epochs = epochs
    if learning_rate is not None:
        cfg.model.learning_rate = learning_rate
    if seed is not None:
        cfg.model.seed = seed
    return cfg


def _check_step(step: float) -> None:
    # 模型本身不校验 step，非正数会导致死循环或空输出
    if step <= 0:
        logs.error(f"--step must be > 0, got {step}")
        raise typer.Exit(code=2)


def _fit(cfg: AppConfig) -> LinearRegressionModel:
    model = LinearRegressionModel(
        cfg.model.epochs,
        cfg.model.learning_rate,
        seed=cfg.model.seed,
    )
    model.load_training_data(cfg.data.training_file)
    model.train()

    print(
        f"[green]Trained on {len(model)} pairs[/green] "
        f"weight={model.weight} bias={model.bias}"
    )
    return model


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    data_file: Optional[str] = typer.Argument(None, help="Training file (overrides config)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
    epochs: Optional[int] = typer.Option(None, help="Training epochs"),
    learning_rate: Optional[float] = typer.Option(None, help="Learning rate"),
    seed: Optional[int] = typer.Option(None, help="Shuffle seed"),
    start: Optional[float] = typer.Option(None, help="First input of the sweep"),
    end: Optional[float] = typer.Option(None, help="Last input of the sweep (inclusive)"),
    step: Optional[float] = typer.Option(None, help="Sweep increment, must be > 0"),
    threshold: Optional[float] = typer.Option(None, help="Outputs inside (-t, t) print as 0"),
):
    """
    训练模型，然后对 [start, end] 区间按 step 输出预测
    """
    cfg = _load_config(config, data_file, epochs, learning_rate, seed)
    pred = cfg.predict
    start = pred.start if start is None else start
    end = pred.end if end is None else end
    step = pred.step if step is None else step
    threshold = pred.threshold if threshold is None else threshold

    _check_step(step)

    model = _fit(cfg)
    model.predict_range(start, end, step, threshold, sink=sys.stdout)


@app.command()
def evaluate(
    data_file: Optional[str] = typer.Argument(None, help="Training file (overrides config)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
    epochs: Optional[int] = typer.Option(None, help="Training epochs"),
    learning_rate: Optional[float] = typer.Option(None, help="Learning rate"),
    seed: Optional[int] = typer.Option(None, help="Shuffle seed"),
    threshold: Optional[float] = typer.Option(None, help="Outputs inside (-t, t) print as 0"),
):
    """
    训练模型，然后对训练集中的所有输入输出预测
    """
    cfg = _load_config(config, data_file, epochs, learning_rate, seed)
    threshold = cfg.predict.threshold if threshold is None else threshold

    model = _fit(cfg)
    model.predict_all(threshold, sink=sys.stdout)


if __name__ == "__main__":
    app()

# python -m linreg.cli run data/data.txt --epochs 1000 --learning-rate 0.01

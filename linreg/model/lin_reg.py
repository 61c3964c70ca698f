# linreg/model/lin_reg.py
from __future__ import annotations

from typing import Iterable, List, Optional, TextIO, Tuple

import numpy as np

from linreg import logs
from linreg.model.extractor import extract_pair
from linreg.model.report import sweep, write_block


class LinearRegressionModel:
    """
    LinearRegressionModel（single feature / online SGD）

    y = weight * x + bias

    State (owned exclusively by the model):
    - training set  : _train_in / _train_out (append-only while loading)
    - training order: permutation of [0, n), reshuffled every epoch
    - parameters    : weight / bias, both 0 until trained
    - generator     : numpy Generator used by shuffle()

    Ownership:
    - No duplication: copy / deepcopy / pickle raise TypeError
    - Transfer only: LinearRegressionModel.take(source) moves all state
      and resets `source` to the empty / zero state
    """

    def __init__(
        self,
        epochs: int = 0,
        learning_rate: float = 0.0,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._train_in: List[float] = []
        self._train_out: List[float] = []
        self._train_order: List[int] = []
        self._weight = 0.0
        self._bias = 0.0
        self._learning_rate = 0.0
        self._epochs = 0
        self._rng = rng if rng is not None else np.random.default_rng(seed)

        self.set_epochs(epochs)
        self.set_learning_rate(learning_rate)

    # --------------------------------------------------
    # Ownership
    # --------------------------------------------------
    @classmethod
    def take(cls, source: "LinearRegressionModel") -> "LinearRegressionModel":
        model = cls.__new__(cls)
        model.__dict__.update(source.__dict__)
        source._reset()
        return model

    def _reset(self) -> None:
        # 新的容器，与转移后的模型不共享任何 list
        self._train_in = []
        self._train_out = []
        self._train_order = []
        self._weight = 0.0
        self._bias = 0.0
        self._learning_rate = 0.0
        self._epochs = 0
        self._rng = np.random.default_rng()

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied, use take()")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied, use take()")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    # --------------------------------------------------
    # Accessors
    # --------------------------------------------------
    @property
    def weight(self) -> float:
        return self._weight

    @property
    def bias(self) -> float:
        return self._bias

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def epochs(self) -> int:
        return self._epochs

    @property
    def training_inputs(self) -> Tuple[float, ...]:
        return tuple(self._train_in)

    @property
    def training_outputs(self) -> Tuple[float, ...]:
        return tuple(self._train_out)

    @property
    def training_order(self) -> Tuple[int, ...]:
        return tuple(self._train_order)

    def __len__(self) -> int:
        return len(self._train_in)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self._weight}, bias={self._bias}, "
            f"learning_rate={self._learning_rate}, epochs={self._epochs}, "
            f"samples={len(self._train_in)})"
        )

    # --------------------------------------------------
    # Configuration（非法值静默忽略，保留旧值）
    # --------------------------------------------------
    def set_epochs(self, epochs: int) -> None:
        n = int(epochs)
        if n > 0:
            self._epochs = n

    def set_learning_rate(self, learning_rate: float) -> None:
        if learning_rate > 0:
            self._learning_rate = float(learning_rate)

    # --------------------------------------------------
    # Data ingestion
    # --------------------------------------------------
    def extract(self, line: str) -> bool:
        pair = extract_pair(line)
        if pair is None:
            return False

        self._train_in.append(pair[0])
        self._train_out.append(pair[1])
        self._train_order.append(len(self._train_order))
        return True

    def load_training_data(self, path) -> int:
        """
        Reads `path` line by line and feeds every line through extract().
        Additive across calls. An unopenable file is reported and skipped.

        Returns the number of training pairs added.
        """
        try:
            f = open(path, "r", encoding="utf-8", errors="replace")
        except OSError:
            logs.error(f"Could not open file at path {path}!")
            return 0

        added = 0
        with f:
            for line in f:
                if self.extract(line):
                    added += 1

        logs.info(f"[LinearRegressionModel] loaded {added} pairs from {path}")
        return added

    def set_training_data(
        self,
        inputs: Iterable[float],
        outputs: Iterable[float],
    ) -> None:
        """
        Bulk replace. Mismatched lengths are truncated to the shorter one.
        """
        train_in = [float(x) for x in inputs]
        train_out = [float(y) for y in outputs]
        n = min(len(train_in), len(train_out))

        self._train_in = train_in[:n]
        self._train_out = train_out[:n]
        self._train_order = list(range(n))

    # --------------------------------------------------
    # Training
    # --------------------------------------------------
    def shuffle(self) -> None:
        """
        Single forward pass: every slot swaps with a random slot in [0, n).
        Not a uniform permutation, but always a permutation.
        """
        order = self._train_order
        n = len(order)
        for i in range(n):
            r = int(self._rng.integers(n))
            order[i], order[r] = order[r], order[i]

    def optimize(self, x: float, reference: float) -> None:
        prediction = self._weight * x + self._bias
        error = reference - prediction
        delta = error * self._learning_rate
        self._bias += delta
        self._weight += delta * x

    @logs.catch(msg="training failed")
    def train(self) -> None:
        logs.info(
            f"[LinearRegressionModel] START epochs={self._epochs} "
            f"lr={self._learning_rate} samples={len(self._train_in)}"
        )

        for epoch in range(self._epochs):
            self.shuffle()

            for j in self._train_order:
                self.optimize(self._train_in[j], self._train_out[j])

            logs.debug(
                f"[LinearRegressionModel] epoch={epoch + 1}/{self._epochs} "
                f"weight={self._weight} bias={self._bias}"
            )

        logs.info(
            f"[LinearRegressionModel] DONE weight={self._weight} bias={self._bias}"
        )

    # --------------------------------------------------
    # Inference
    # --------------------------------------------------
    def predict(self, x: float) -> float:
        return self._weight * x + self._bias

    def predict_all(self, threshold: float = 0.001, *, sink: TextIO) -> None:
        """Prediction block over the stored inputs, in storage order."""
        write_block(sink, list(self._train_in), self.predict, threshold)

    def predict_range(
        self,
        start: float,
        end: float,
        step: float = 1.0,
        threshold: float = 0.001,
        *,
        sink: TextIO,
    ) -> None:
        """
        Prediction block over start, start+step, ... while x <= end.
        `step` must be > 0 for the sweep to terminate (not validated here).
        """
        write_block(
            sink,
            sweep(float(start), float(end), float(step)),
            self.predict,
            threshold,
        )

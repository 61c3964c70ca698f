"""
Single-feature linear regression (online SGD).

- extractor : text line → (input, output) training pair
- lin_reg   : LinearRegressionModel (state / training / inference)
- report    : prediction block rendering
"""
from .lin_reg import LinearRegressionModel

__all__ = ["LinearRegressionModel"]

# linreg/model/extractor.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from linreg import logs

# 逗号视为小数点别名（兼容逗号小数的地区格式）
NUMERIC_CHARS = frozenset("0123456789-.,")

# 只取 token 的最长合法前缀（"1-2" → 1, "1.2.3" → 1.2）
_LEADING_FLOAT = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


@dataclass(frozen=True)
class ParseResult:
    text: str
    value: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def scan_tokens(line: str) -> List[str]:
    """
    Split a line into contiguous runs of numeric characters.
    Any other character (whitespace included) ends the current run.
    """
    tokens: List[str] = []
    current: List[str] = []

    for ch in line:
        if ch in NUMERIC_CHARS:
            current.append(ch)
        elif current:
            tokens.append("".join(current))
            current = []

    if current:
        tokens.append("".join(current))
    return tokens


def parse_number(token: str) -> ParseResult:
    text = token.replace(",", ".")
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return ParseResult(text=text)
    return ParseResult(text=text, value=float(match.group(0)))


def extract_numbers(line: str) -> List[float]:
    values: List[float] = []

    for token in scan_tokens(line):
        result = parse_number(token)
        if not result.ok:
            logs.warning(f"Failed to convert {result.text} to float")
            continue
        values.append(result.value)

    return values


def extract_pair(line: str) -> Optional[Tuple[float, float]]:
    """
    Strict two-values-per-line contract:
      - exactly 2 numbers → (input, output) in encountered order
      - 0 / 1 / 3+ numbers → None (line contributes nothing)
    """
    values = extract_numbers(line)
    if len(values) != 2:
        return None
    return values[0], values[1]

"""
Deterministic synthetic inputs and RNG seeding.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import torch

__all__ = [
    "DEFAULT_SEED",
    "TensorSpec",
    "build_input",
    "build_inputs",
    "resolve_dtype",
    "seed_rng",
    "set_default_seed",
]


DEFAULT_SEED = 20251013
_DEFAULT_SEED = DEFAULT_SEED

DISTRIBUTIONS = ("ones", "zeros", "full", "normal", "uniform")

_DTYPES = {
    "float16": torch.float16,
    "half": torch.float16,
    "float32": torch.float32,
    "float": torch.float32,
    "float64": torch.float64,
    "double": torch.float64,
    "bfloat16": torch.bfloat16,
    "bf16": torch.bfloat16,
    "int64": torch.int64,
    "long": torch.int64,
    "int32": torch.int32,
    "int": torch.int32,
    "int16": torch.int16,
    "short": torch.int16,
    "int8": torch.int8,
    "uint8": torch.uint8,
    "bool": torch.bool,
}


def set_default_seed(seed: int) -> None:
    global _DEFAULT_SEED
    _DEFAULT_SEED = seed


def seed_rng(seed: Optional[int] = None) -> int:
    """
    Seed all supported RNGs
    """
    actual_seed = _DEFAULT_SEED if seed is None else seed
    random.seed(actual_seed)
    np.random.seed(actual_seed)
    torch.manual_seed(actual_seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(actual_seed)
    return actual_seed


@dataclass(frozen=True)
class TensorSpec:
    """
    Declarative description of one synthetic input tensor.

    ``value`` is used by the ``full`` distribution, ``mean``/``std`` by
    ``normal`` and ``low``/``high`` by ``uniform``.
    """

    shape: tuple[int, ...] = (1, 3, 224, 224)
    dtype: str = "float32"
    distribution: str = "ones"
    value: float = 0.0
    mean: float = 0.0
    std: float = 1.0
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        if not self.shape or any(int(dim) < 0 for dim in self.shape):
            raise ValueError(f"Tensor spec requires a non-empty, non-negative shape: {self.shape}")
        if self.distribution.lower() not in DISTRIBUTIONS:
            raise ValueError(f"Unsupported distribution '{self.distribution}'")
        resolve_dtype(self.dtype)


def resolve_dtype(name: str) -> torch.dtype:
    try:
        return _DTYPES[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported dtype '{name}'") from exc


def build_input(
    spec: TensorSpec,
    *,
    device: Optional[torch.device | str] = None,
) -> torch.Tensor:
    shape = tuple(int(dim) for dim in spec.shape)
    dtype = resolve_dtype(spec.dtype)
    distribution = spec.distribution.lower()

    if distribution == "ones":
        tensor = torch.ones(shape, dtype=dtype)
    elif distribution == "zeros":
        tensor = torch.zeros(shape, dtype=dtype)
    elif distribution == "full":
        tensor = torch.full(shape, spec.value, dtype=dtype)
    elif distribution == "normal":
        tensor = torch.randn(shape, dtype=dtype)
        if spec.std != 1.0:
            tensor = tensor * spec.std
        if spec.mean != 0.0:
            tensor = tensor + spec.mean
    else:
        tensor = torch.empty(shape, dtype=dtype).uniform_(spec.low, spec.high)

    if device is not None:
        tensor = tensor.to(device)
    return tensor


def build_inputs(
    specs: Sequence[TensorSpec],
    *,
    device: Optional[torch.device | str] = None,
) -> list[Any]:
    """
    Materialize the ordered positional inputs for one forward call.
    """
    return [build_input(spec, device=device) for spec in specs]

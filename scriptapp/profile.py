"""
Run profiles: which inputs to feed the model and which slice of its output to
report. ``DEFAULT_PROFILE`` is what the ``example-app`` command uses; other
profiles can be read from YAML files shaped like::

    name: tiny_convnet
    device: cpu
    seed: 7
    inputs:
      - shape: [1, 3, 224, 224]
        dtype: float32
        distribution: ones
    report:
      dim: 1
      start: 0
      end: 5
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .data import TensorSpec

__all__ = [
    "DEFAULT_PROFILE",
    "RunProfile",
    "SliceSpec",
    "load_run_profile",
]


@dataclass(frozen=True)
class SliceSpec:
    dim: int = 1
    start: int = 0
    end: int = 5

    def __post_init__(self) -> None:
        if self.dim < 0:
            raise ValueError(f"Slice dim must be non-negative (got {self.dim})")
        if self.start < 0 or self.end <= self.start:
            raise ValueError(
                f"Slice bounds must satisfy 0 <= start < end (got [{self.start}, {self.end}))"
            )

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class RunProfile:
    name: str = "default"
    description: str | None = None
    device: str = "cpu"
    seed: Optional[int] = None
    inputs: tuple[TensorSpec, ...] = field(default_factory=lambda: (TensorSpec(),))
    report: SliceSpec = field(default_factory=SliceSpec)

    def __post_init__(self) -> None:
        if not self.inputs:
            raise ValueError(f"Profile '{self.name}' must define at least one input")


DEFAULT_PROFILE = RunProfile()


def load_run_profile(path: Path | str) -> RunProfile:
    profile_path = Path(path)
    data = _load_profile_dict(profile_path)

    inputs_cfg = data.get("inputs", [{}])
    if not isinstance(inputs_cfg, list):
        raise TypeError(f"Profile {profile_path}: 'inputs' must be a list (got {type(inputs_cfg)})")
    if not inputs_cfg:
        raise ValueError(f"Profile {profile_path}: 'inputs' must not be empty")

    report_cfg = data.get("report", {})
    if not isinstance(report_cfg, Mapping):
        raise TypeError(f"Profile {profile_path}: 'report' must be a mapping (got {type(report_cfg)})")

    seed = None
    if "seed" in data:
        seed = _number(data, "seed", None, int, profile_path)

    return RunProfile(
        name=data.get("name", profile_path.stem),
        description=data.get("description"),
        device=str(data.get("device", DEFAULT_PROFILE.device)),
        seed=seed,
        inputs=tuple(_tensor_spec(entry, profile_path) for entry in inputs_cfg),
        report=SliceSpec(
            dim=_number(report_cfg, "dim", 1, int, profile_path, "report."),
            start=_number(report_cfg, "start", 0, int, profile_path, "report."),
            end=_number(report_cfg, "end", 5, int, profile_path, "report."),
        ),
    )


def _number(
    cfg: Mapping[str, Any],
    key: str,
    default: Any,
    kind: type,
    profile_path: Path,
    prefix: str = "",
) -> Any:
    raw = cfg.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeError(
            f"Profile {profile_path}: '{prefix}{key}' must be a number (got {raw!r})"
        )
    if kind is int and raw != int(raw):
        raise ValueError(
            f"Profile {profile_path}: '{prefix}{key}' must be an integer (got {raw!r})"
        )
    return kind(raw)


def _tensor_spec(entry: Any, profile_path: Path) -> TensorSpec:
    if not isinstance(entry, Mapping):
        raise TypeError(f"Profile {profile_path}: each input must be a mapping (got {entry!r})")
    shape = entry.get("shape", TensorSpec.shape)
    if not isinstance(shape, (list, tuple)):
        raise TypeError(f"Profile {profile_path}: input shape must be a list (got {shape!r})")
    dims = {f"shape[{i}]": dim for i, dim in enumerate(shape)}
    return TensorSpec(
        shape=tuple(_number(dims, key, None, int, profile_path, "inputs.") for key in dims),
        dtype=str(entry.get("dtype", "float32")),
        distribution=str(entry.get("distribution", "ones")),
        value=_number(entry, "value", 0.0, float, profile_path, "inputs."),
        mean=_number(entry, "mean", 0.0, float, profile_path, "inputs."),
        std=_number(entry, "std", 1.0, float, profile_path, "inputs."),
        low=_number(entry, "low", 0.0, float, profile_path, "inputs."),
        high=_number(entry, "high", 1.0, float, profile_path, "inputs."),
    )


def _load_profile_dict(profile_path: Path) -> Mapping[str, Any]:
    if not profile_path.exists():
        raise FileNotFoundError(f"Run profile not found at {profile_path}")
    with profile_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"Run profile {profile_path} must be a mapping (got {type(data)})")
    return data

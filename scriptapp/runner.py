"""
Pipeline steps for running a serialized TorchScript module once:

    open_model()  ->  run_forward()  ->  select_slice()  ->  format_slice()

``open_model`` only ever yields a loaded module; a loader that produces nothing
is reported as a load failure before any input is built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import torch

from .errors import InferenceError, ModelLoadError, NullHandleError
from .profile import SliceSpec

logger = logging.getLogger(__name__)

__all__ = [
    "LoadedModel",
    "format_slice",
    "open_model",
    "run_forward",
    "select_slice",
]


@dataclass(frozen=True)
class LoadedModel:
    path: Path
    module: torch.jit.ScriptModule


@contextmanager
def open_model(
    path: Path | str,
    *,
    device: Optional[torch.device | str] = None,
) -> Iterator[LoadedModel]:
    """
    Load the TorchScript archive at ``path`` and hold it for the duration of
    the ``with`` block.

    Raises
    ------
    ModelLoadError
        The file is missing, unreadable, or not a TorchScript archive.
    NullHandleError
        The loader returned ``None``.
    """
    model_path = Path(path)
    target_device = _normalize_device(device)
    logger.info("Loading TorchScript module from %s", model_path)
    try:
        module = torch.jit.load(str(model_path), map_location=target_device)
    except (OSError, RuntimeError, ValueError) as exc:
        raise ModelLoadError(f"failed to load model from {model_path}: {exc}") from exc
    if module is None:
        raise NullHandleError(f"loader returned no module for {model_path}")

    module.eval()
    model = LoadedModel(path=model_path, module=module)
    try:
        yield model
    finally:
        logger.debug("Releasing module loaded from %s", model_path)
        del model, module


def run_forward(model: LoadedModel, inputs: Sequence[Any]) -> torch.Tensor:
    """
    Call the module's ``forward`` with ``inputs`` as positional arguments and
    return its result as a single tensor.
    """
    logger.debug("Running forward on %d input(s)", len(inputs))
    try:
        with torch.inference_mode():
            output = model.module.forward(*inputs)
    except (RuntimeError, TypeError, ValueError) as exc:
        raise InferenceError(f"forward evaluation failed: {exc}") from exc

    if not torch.is_tensor(output):
        raise InferenceError(
            f"expected the model to return a single tensor, got {type(output).__name__}"
        )
    logger.info("Forward produced %s output of shape %s", output.dtype, tuple(output.shape))
    return output


def select_slice(output: torch.Tensor, spec: SliceSpec) -> torch.Tensor:
    """
    Select ``[spec.start, spec.end)`` along ``spec.dim``. The output must be
    wide enough to supply every element; it is never truncated.
    """
    if output.dim() <= spec.dim:
        raise InferenceError(
            f"cannot slice dim {spec.dim} of a {output.dim()}-d output "
            f"with shape {tuple(output.shape)}"
        )
    available = output.size(spec.dim)
    if available < spec.end:
        raise InferenceError(
            f"output has {available} element(s) along dim {spec.dim}, "
            f"need {spec.end} to report [{spec.start}, {spec.end})"
        )
    return output.narrow(spec.dim, spec.start, spec.length)


def format_slice(tensor: torch.Tensor) -> str:
    return str(tensor)


def _normalize_device(device: torch.device | str | None) -> torch.device:
    if device is None:
        return torch.device("cpu")
    return torch.device(device)

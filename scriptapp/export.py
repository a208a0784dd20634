"""
Export an ``nn.Module`` to a TorchScript archive that ``example-app`` can run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import torch
from torch import nn

logger = logging.getLogger(__name__)

__all__ = ["export_script_module"]


def export_script_module(
    module: nn.Module,
    path: Path | str,
    *,
    example_inputs: Optional[Sequence[Any]] = None,
) -> Path:
    """
    Compile ``module`` and save it to ``path``.

    With ``example_inputs`` the module is traced; otherwise it is scripted,
    which keeps data-dependent control flow.
    """
    module.eval()
    if example_inputs is not None:
        with torch.no_grad():
            compiled = torch.jit.trace(module, tuple(example_inputs))
    else:
        compiled = torch.jit.script(module)

    out_path = Path(path)
    _atomic_save(compiled, out_path)
    logger.info("Saved %s to %s", type(module).__name__, out_path)
    return out_path


def _atomic_save(compiled: torch.jit.ScriptModule, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    torch.jit.save(compiled, str(tmp_path))
    tmp_path.replace(path)

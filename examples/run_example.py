"""
Export the tiny_convnet workload to TorchScript and run ``example-app`` on it.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

import torch

from cases.tiny_convnet.model import TinyConvNet
from scriptapp.cli import main as run_cli
from scriptapp.data import seed_rng
from scriptapp.export import export_script_module
from scriptapp.profile import load_run_profile


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
    seed_rng()
    artifact = Path("examples") / "tiny_convnet.pt"
    export_script_module(
        TinyConvNet(),
        artifact,
        example_inputs=(torch.ones(1, 3, 224, 224),),
    )

    status = run_cli([str(artifact)])
    if status != 0:
        sys.exit(status)

    profile = load_run_profile(ROOT / "cases" / "tiny_convnet" / "profile.yaml")
    sys.exit(run_cli([str(artifact)], profile=profile))


if __name__ == "__main__":
    main()

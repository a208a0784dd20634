from pathlib import Path
from typing import Tuple

import pytest
import torch
from torch import nn

from cases.tiny_convnet.model import TinyConvNet
from scriptapp.export import export_script_module


class PairInput(nn.Module):
    def forward(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return x + y


class TupleOutput(nn.Module):
    def forward(self, x: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
        return x, x


class Flat(nn.Module):
    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return x.sum()


@pytest.fixture
def convnet_path(tmp_path: Path) -> Path:
    torch.manual_seed(0)
    return export_script_module(TinyConvNet(), tmp_path / "tiny_convnet.pt")


@pytest.fixture
def narrow_path(tmp_path: Path) -> Path:
    torch.manual_seed(0)
    return export_script_module(TinyConvNet(num_classes=3), tmp_path / "narrow.pt")


@pytest.fixture
def wrong_shape_path(tmp_path: Path) -> Path:
    torch.manual_seed(0)
    return export_script_module(nn.Linear(16, 4), tmp_path / "linear16.pt")


@pytest.fixture
def pair_input_path(tmp_path: Path) -> Path:
    return export_script_module(PairInput(), tmp_path / "pair.pt")


@pytest.fixture
def tuple_output_path(tmp_path: Path) -> Path:
    return export_script_module(TupleOutput(), tmp_path / "tuple.pt")


@pytest.fixture
def flat_output_path(tmp_path: Path) -> Path:
    return export_script_module(Flat(), tmp_path / "flat.pt")

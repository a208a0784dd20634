"""
Small image classifier taking ``[N, 3, H, W]`` inputs, used to exercise the
runner end to end.
"""

import torch
from torch import nn

IN_CHANNELS = 3
HIDDEN_CHANNELS = 8
NUM_CLASSES = 10


class TinyConvNet(nn.Module):
    """
    Strided conv, ReLU, global average pool and a linear head. The pooling
    makes it accept any spatial size.
    """

    def __init__(
        self,
        in_channels: int = IN_CHANNELS,
        hidden_channels: int = HIDDEN_CHANNELS,
        num_classes: int = NUM_CLASSES,
    ) -> None:
        super().__init__()
        self.conv = nn.Conv2d(in_channels, hidden_channels, kernel_size=3, stride=2, padding=1)
        self.act = nn.ReLU()
        self.pool = nn.AdaptiveAvgPool2d(1)
        self.head = nn.Linear(hidden_channels, num_classes)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        features = self.pool(self.act(self.conv(x)))
        return self.head(torch.flatten(features, 1))

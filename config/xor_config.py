"""XOR problem configuration."""

from .base_config import BaseConfig


class XORConfig(BaseConfig):
    """Configuration for the 2-4-1 XOR network."""

    # Model architecture
    layer_sizes = [2, 4, 1]  # Input width, hidden width, output width

    # Checkpointing
    checkpoint_name = "xor_network.pt"

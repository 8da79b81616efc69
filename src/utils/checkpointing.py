"""Network checkpointing utilities."""

import torch
import os

from src.models.feedforward.activation import get_activation
from src.models.feedforward.layer import Layer
from src.models.feedforward.network import Network


def save_checkpoint(network, path, epoch=None, error=None):
    """
    Save network structure and weights.

    Args:
        network: Network to save
        path: Path to save checkpoint
        epoch: Epochs trained so far (optional)
        error: Last epoch error (optional)
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    checkpoint = {
        'layer_sizes': network.layer_sizes,
        'activations': [layer.activation.name for layer in network.layers],
        'matrices': [torch.from_numpy(w) for w in network.weights()],
        'epoch': epoch,
        'error': error,
    }

    torch.save(checkpoint, path)
    print(f"Checkpoint saved to {path}")


def _read(path):
    checkpoint = torch.load(path, map_location='cpu', weights_only=False)
    for key in ('layer_sizes', 'matrices'):
        if key not in checkpoint:
            raise ValueError(f"{path} is not a network checkpoint (missing '{key}')")
    return checkpoint


def load_checkpoint(network, path):
    """
    Load checkpoint weights into an existing network.

    Args:
        network: Network with the same layer sizes as the saved one
        path: Path to checkpoint

    Returns:
        network: Network with loaded weights
        epoch: Epoch number from checkpoint (None if not recorded)
        error: Error from checkpoint (None if not recorded)
    """
    checkpoint = _read(path)

    if list(checkpoint['layer_sizes']) != network.layer_sizes:
        raise ValueError(
            f"Checkpoint layer sizes {checkpoint['layer_sizes']} don't match network {network.layer_sizes}"
        )
    network.set_weights([m.numpy() for m in checkpoint['matrices']])

    epoch = checkpoint.get('epoch')
    error = checkpoint.get('error')

    print(f"Checkpoint loaded from {path} (epoch {epoch})")
    return network, epoch, error


def load_network(path):
    """
    Build a new network from a checkpoint.

    Returns:
        network: Network with the saved structure, activations and weights
        epoch: Epoch number from checkpoint
        error: Error from checkpoint
    """
    checkpoint = _read(path)
    activations = checkpoint.get('activations') or ['sigmoid'] * len(checkpoint['layer_sizes'])

    network = Network()
    for size, name in zip(checkpoint['layer_sizes'], activations):
        network.add_layer(Layer(int(size), get_activation(name)))

    return load_checkpoint(network, path)

#!/usr/bin/env python
"""
Train a feedforward network on XOR with backpropagation and momentum.

Usage:
    python scripts/train_xor.py
    python scripts/train_xor.py --seed 1 --max-epochs 20000
    python scripts/train_xor.py --resume checkpoints/xor_network.pt
    python scripts/train_xor.py --config my_config.py --no-plot
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import argparse
import time

from config.xor_config import XORConfig
from src.data.xor import xor_dataset
from src.models.feedforward.activation import get_activation
from src.models.feedforward.network import Network
from src.training.backpropagation import BackPropagation
from src.training.loop import train_until
from src.utils.checkpointing import load_checkpoint, save_checkpoint
from src.utils.csv_logger import CSVLogger
from src.utils.visualization import TrainingVisualizer


def load_config(path):
    """Load XORConfig from a custom config file, or the default one."""
    if path is None:
        return XORConfig()
    import importlib.util
    spec = importlib.util.spec_from_file_location("config", path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.XORConfig()


def main():
    """Main training function."""
    parser = argparse.ArgumentParser(description='Train a feedforward network on XOR')
    parser.add_argument('--config', type=str, default=None, help='Path to custom config')
    parser.add_argument('--resume', type=str, default=None, help='Start from checkpointed weights')
    parser.add_argument('--seed', type=int, default=None, help='Weight initialization seed')
    parser.add_argument('--max-epochs', type=int, default=None, help='Override epoch cap')
    parser.add_argument('--no-plot', action='store_true', help='Skip writing plots')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.seed is not None:
        config.seed = args.seed
    if args.max_epochs is not None:
        config.max_epochs = args.max_epochs

    print("=" * 60)
    print("XOR Backpropagation Training")
    print("=" * 60)
    print(f"Layers: {config.layer_sizes}, activation: {config.activation}")
    print(f"Learning rate: {config.learning_rate}, momentum: {config.momentum}")
    print(f"Stop at error <= {config.target_error} or {config.max_epochs} epochs")
    print()

    # Build network
    network = Network.from_sizes(config.layer_sizes, get_activation(config.activation))
    if args.resume:
        if not os.path.exists(args.resume):
            print(f"ERROR: Checkpoint not found: {args.resume}")
            return
        print(f"Resuming from checkpoint: {args.resume}")
        network, _, _ = load_checkpoint(network, args.resume)
    else:
        network.reset(config.init_lower, config.init_upper, seed=config.seed)
    print(f"Network: {network}, parameters: {network.parameter_count()}")
    print()

    inputs, expected = xor_dataset()
    trainer = BackPropagation(config.learning_rate, config.momentum, inputs, expected, network)

    # Per-epoch CSV log
    os.makedirs(config.log_dir, exist_ok=True)
    timestamp = time.strftime('%Y%m%d_%H%M%S')
    csv_path = os.path.join(config.log_dir, f'xor_training_log_{timestamp}.csv')
    csv_logger = CSVLogger(csv_path, config)
    print(f"CSV logging enabled: {csv_path}")

    start = time.time()
    last = [start]

    def log_epoch(epoch, error):
        now = time.time()
        csv_logger.log_epoch(epoch, {
            'error': error,
            'converged': error <= config.target_error,
            'epoch_time_seconds': now - last[0],
            'cumulative_time_seconds': now - start,
        })
        last[0] = now

    history = train_until(
        trainer,
        max_epochs=config.max_epochs,
        target_error=config.target_error,
        callback=log_epoch,
        log_every=config.log_every,
        show_progress=config.show_progress,
    )

    print()
    if history.converged:
        print(f"✓ Converged after {history.epochs} epochs (error={history.final_error:.6f})")
    else:
        print(f"⚠️  Did not converge in {history.epochs} epochs (error={history.final_error:.6f})")
    print()

    print("Neural Network Results:")
    for x, d in zip(inputs, expected):
        actual = network.predict(x)
        print(f"  {x[0]:.1f},{x[1]:.1f}, actual={actual[0]:.6f}, ideal={d[0]:.1f}")
    print()

    checkpoint_path = os.path.join(config.checkpoint_dir, config.checkpoint_name)
    save_checkpoint(network, checkpoint_path, epoch=history.epochs, error=history.final_error)

    if not args.no_plot:
        visualizer = TrainingVisualizer(os.path.join(config.output_dir, 'plots'))
        visualizer.plot_error_curve(
            history.points(),
            title=f"XOR {'-'.join(str(s) for s in config.layer_sizes)} training error",
            save_path=visualizer.save_dir / 'xor_error.png',
        )
        visualizer.plot_weight_matrices(network, save_path=visualizer.save_dir / 'xor_weights.png')

    print()
    print("Training complete!")


if __name__ == "__main__":
    main()

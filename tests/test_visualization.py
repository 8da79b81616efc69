#!/usr/bin/env python
"""Test error-curve and weight-matrix plots."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import shutil
import tempfile
import matplotlib.pyplot as plt

from src.models.feedforward.network import Network
from src.utils.visualization import TrainingVisualizer


def test_error_curve_plot():
    """Error curve is drawn from (epoch, error) pairs and saved."""
    print("=" * 80)
    print("Testing Error Curve Plot")
    print("=" * 80)

    test_dir = tempfile.mkdtemp(prefix='test_plots_')
    try:
        visualizer = TrainingVisualizer(os.path.join(test_dir, 'plots'))
        assert visualizer.save_dir.is_dir()

        points = [(1, 1.2), (2, 0.9), (3, 0.4), (4, 0.1)]
        save_path = visualizer.save_dir / 'error.png'
        fig = visualizer.plot_error_curve(points, save_path=save_path, log_scale=True)

        assert save_path.exists() and save_path.stat().st_size > 0
        ax = fig.axes[0]
        xs, ys = ax.lines[0].get_data()
        assert list(xs) == [1, 2, 3, 4] and list(ys) == [1.2, 0.9, 0.4, 0.1]
        assert ax.get_xlabel() == 'Epoch' and ax.get_ylabel() == 'Error'
        plt.close(fig)

        try:
            visualizer.plot_error_curve([])
            raise AssertionError("Empty points should raise")
        except ValueError:
            pass

        print("✓ Error curve saved")
    finally:
        shutil.rmtree(test_dir)


def test_weight_heatmaps():
    """One heatmap per weight matrix."""
    print("=" * 80)
    print("Testing Weight Heatmaps")
    print("=" * 80)

    test_dir = tempfile.mkdtemp(prefix='test_plots_')
    try:
        visualizer = TrainingVisualizer(test_dir)
        net = Network.from_sizes([2, 4, 3, 1])
        net.reset(-0.5, 0.5, seed=0)

        save_path = os.path.join(test_dir, 'weights.png')
        fig = visualizer.plot_weight_matrices(net, save_path=save_path)
        assert os.path.exists(save_path)

        titles = [ax.get_title() for ax in fig.axes if ax.get_title()]
        assert titles == ['Layer 0 -> 1', 'Layer 1 -> 2', 'Layer 2 -> 3']
        plt.close(fig)

        try:
            visualizer.plot_weight_matrices(Network.from_sizes([3]))
            raise AssertionError("Network without matrices should raise")
        except ValueError:
            pass

        print("✓ Weight heatmaps saved")
    finally:
        shutil.rmtree(test_dir)


if __name__ == "__main__":
    test_error_curve_plot()
    test_weight_heatmaps()
    print("\n✅ All visualization tests passed!")

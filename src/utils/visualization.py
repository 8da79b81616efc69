"""Training visualization tools.

Plot the (epoch, error) curve produced by repeated training calls and the
learned weight-and-bias matrices of a network.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path


class TrainingVisualizer:
    """Plot training curves and weight matrices."""

    def __init__(self, save_dir='outputs/plots'):
        """
        Initialize visualizer.

        Args:
            save_dir: Directory to save plots
        """
        self.save_dir = Path(save_dir)
        self.save_dir.mkdir(parents=True, exist_ok=True)

    def plot_error_curve(self, points, title=None, save_path=None, log_scale=False):
        """
        Plot error against epoch.

        Args:
            points: Sequence of (epoch, error) pairs
            title: Optional custom title
            save_path: Optional path to save plot
            log_scale: Use a logarithmic error axis

        Returns:
            fig: Matplotlib figure
        """
        points = list(points)
        if not points:
            raise ValueError("No (epoch, error) points to plot")
        epochs = [p[0] for p in points]
        errors = [p[1] for p in points]

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.plot(epochs, errors, label='epochs')

        ax.set_title(title or 'Training Error', fontsize=14)
        ax.set_xlabel('Epoch', fontsize=12)
        ax.set_ylabel('Error', fontsize=12)
        if log_scale:
            ax.set_yscale('log')
        ax.legend()
        ax.grid(True, alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Saved error curve to: {save_path}")

        return fig

    def plot_weight_matrices(self, network, save_path=None):
        """
        Plot every weight-and-bias matrix of a network as a heatmap.

        Args:
            network: Network whose matrices to draw
            save_path: Optional path to save plot

        Returns:
            fig: Matplotlib figure
        """
        owners = [layer for layer in network.layers if layer.has_matrix()]
        if not owners:
            raise ValueError("Network has no weight matrices to plot")

        fig, axes = plt.subplots(1, len(owners), figsize=(5 * len(owners), 4), squeeze=False)
        axes = axes[0]

        for ax, layer in zip(axes, owners):
            weights = layer.matrix.to_numpy()
            row_labels = [str(j) for j in range(layer.neuron_count)] + ['bias']
            col_labels = [str(i) for i in range(layer.next.neuron_count)]

            sns.heatmap(weights, xticklabels=col_labels, yticklabels=row_labels,
                        cmap='coolwarm', center=0.0, annot=weights.size <= 64, fmt='.2f',
                        cbar=True, ax=ax, linewidths=0.5, linecolor='white')

            ax.set_title(f'Layer {layer.index} -> {layer.index + 1}', fontsize=12)
            ax.set_xlabel('Next layer neuron', fontsize=10)
            ax.set_ylabel('Neuron', fontsize=10)
            plt.setp(ax.get_yticklabels(), rotation=0)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Saved weight heatmaps to: {save_path}")

        return fig

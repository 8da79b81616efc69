"""Evaluate a saved XOR network.

Loads a checkpoint, runs every XOR row through it and reports:
- Per-row outputs against the expected values
- Summed squared error over the dataset
- Optionally, a summary of a training CSV log and its error curve
"""

import argparse
import os
import sys
import pandas as pd

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.data.xor import xor_dataset
from src.utils.checkpointing import load_network
from src.utils.visualization import TrainingVisualizer


def evaluate_network(network, inputs, expected, tolerance=0.2):
    """
    Run every row through the network.

    Returns:
        results: Dictionary with per-row outputs, total error and accuracy
    """
    rows = []
    total_error = 0.0
    for x, d in zip(inputs, expected):
        actual = network.predict(x)
        sq_error = float(((actual - d) ** 2).sum())
        total_error += sq_error
        rows.append({
            'input': x.tolist(),
            'expected': d.tolist(),
            'actual': actual.tolist(),
            'within_tolerance': bool((abs(actual - d) <= tolerance).all()),
        })
    correct = sum(r['within_tolerance'] for r in rows)
    return {
        'rows': rows,
        'total_error': total_error,
        'correct': correct,
        'total': len(rows),
    }


def summarize_log(log_path, output_dir=None):
    """Print a summary of a training CSV log and optionally re-plot its error curve."""
    df = pd.read_csv(log_path)
    if df.empty:
        print(f"Log {log_path} has no rows")
        return df

    print(f"\nTraining log: {log_path}")
    print(f"  Epochs logged: {len(df)}")
    print(f"  First error:   {df['error'].iloc[0]:.6f}")
    print(f"  Final error:   {df['error'].iloc[-1]:.6f}")
    print(f"  Best error:    {df['error'].min():.6f} (epoch {int(df.loc[df['error'].idxmin(), 'epoch'])})")
    if 'cumulative_time_seconds' in df and df['cumulative_time_seconds'].notna().any():
        print(f"  Wall time:     {df['cumulative_time_seconds'].iloc[-1]:.2f}s")

    if output_dir:
        visualizer = TrainingVisualizer(output_dir)
        visualizer.plot_error_curve(
            zip(df['epoch'], df['error']),
            title='Training Error (from log)',
            save_path=visualizer.save_dir / 'error_from_log.png',
        )
    return df


def main():
    parser = argparse.ArgumentParser(description='Evaluate a saved XOR network')
    parser.add_argument('--checkpoint', type=str, required=True,
                        help='Path to network checkpoint')
    parser.add_argument('--tolerance', type=float, default=0.2,
                        help='Max |actual - expected| for a row to count as correct (default: 0.2)')
    parser.add_argument('--log', type=str, default=None,
                        help='Training CSV log to summarize')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for plots (default: no plots)')

    args = parser.parse_args()

    if not os.path.exists(args.checkpoint):
        print(f"ERROR: Checkpoint not found: {args.checkpoint}")
        return

    network, epoch, error = load_network(args.checkpoint)
    print(f"Network: {network} (trained {epoch} epochs, last error {error})")

    inputs, expected = xor_dataset()
    results = evaluate_network(network, inputs, expected, tolerance=args.tolerance)

    print("\nResults:")
    for row in results['rows']:
        mark = '✓' if row['within_tolerance'] else '✗'
        print(f"  {mark} input={row['input']} actual={row['actual'][0]:.6f} ideal={row['expected'][0]:.1f}")
    print(f"\nTotal squared error: {results['total_error']:.6f}")
    print(f"Rows within tolerance: {results['correct']}/{results['total']}")

    if args.log:
        summarize_log(args.log, args.output_dir)

    print("\n✓ Evaluation complete!")


if __name__ == '__main__':
    main()

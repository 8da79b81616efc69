"""Epoch loop with an error-threshold / epoch-cap stopping rule."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
from tqdm import tqdm

from .backpropagation import BackPropagation


@dataclass
class TrainingHistory:
    errors: List[float] = field(default_factory=list)
    converged: bool = False

    @property
    def epochs(self) -> int:
        return len(self.errors)

    @property
    def final_error(self) -> float:
        return self.errors[-1] if self.errors else float('inf')

    def points(self) -> List[Tuple[int, float]]:
        """(epoch, error) pairs with 1-based epochs, ready for plotting."""
        return [(i + 1, e) for i, e in enumerate(self.errors)]


def train_until(
    trainer: BackPropagation,
    max_epochs: int,
    target_error: float,
    callback: Optional[Callable[[int, float], None]] = None,
    log_every: Optional[int] = None,
    show_progress: bool = True,
) -> TrainingHistory:
    """
    Call trainer.train() until the epoch error drops to `target_error` or
    `max_epochs` epochs have run.

    Args:
        trainer: BackPropagation instance
        max_epochs: Epoch cap (>= 1)
        target_error: Stop as soon as an epoch's error is <= this
        callback: Called as callback(epoch, error) after every epoch (1-based)
        log_every: Write a progress line every N epochs (None: never)
        show_progress: Display a tqdm progress bar

    Returns:
        history: TrainingHistory with one error per epoch run
    """
    if max_epochs < 1:
        raise ValueError(f"max_epochs must be >= 1, got {max_epochs}")

    history = TrainingHistory()
    pbar = tqdm(range(1, max_epochs + 1), desc="Training", disable=not show_progress)
    for epoch in pbar:
        error = trainer.train()
        history.errors.append(error)
        pbar.set_postfix(error=f"{error:.6f}")

        if callback is not None:
            callback(epoch, error)
        if log_every and epoch % log_every == 0:
            tqdm.write(f"Epoch #{epoch} Error: {error:.6f}")

        if error <= target_error:
            history.converged = True
            break
    pbar.close()
    return history

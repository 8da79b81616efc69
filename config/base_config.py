"""Base configuration for all networks."""

class BaseConfig:
    """Shared configuration across all problems."""

    # Training
    learning_rate = 0.2     # Step size applied to the accumulated deltas
    momentum = 0.9          # Fraction of the previous update carried into the next one
    max_epochs = 10000      # Hard cap on full dataset sweeps
    target_error = 0.05     # Stop once the epoch's sum of squared error reaches this

    # Weight initialization (uniform, inclusive bounds)
    init_lower = -0.5
    init_upper = 0.5
    seed = None             # None: fresh randomness every run

    # Model
    activation = "sigmoid"  # Options: sigmoid, tanh

    # Logging
    log_every = 500         # Print a progress line every N epochs
    show_progress = True    # tqdm progress bar over epochs

    # Paths
    checkpoint_dir = "checkpoints"
    log_dir = "logs"
    output_dir = "outputs"

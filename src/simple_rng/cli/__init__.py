"""simple-rng command-line interface."""

"""Pattern demos - one self-contained module per design pattern."""

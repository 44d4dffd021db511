"""Two-dimensional MacCormack solver for hydrodynamics and ideal MHD."""

__version__ = "0.1.0"
__all__ = ["config", "physics", "scenarios", "solver", "output", "probes", "cli"]
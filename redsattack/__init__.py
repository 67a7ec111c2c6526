"""Attack of the Reds: a fixed-shooter arcade game with diving alien fleets."""

__version__ = "0.1.0"
__all__ = ["__version__"]
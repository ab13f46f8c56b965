"""Entity-component-system core with camera and falling-sphere systems for particle simulations."""

__version__ = "0.1.0"
__all__ = ["__version__"]
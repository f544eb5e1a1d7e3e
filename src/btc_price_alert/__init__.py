"""Bitcoin price monitor that plays a sound when the price moves past a threshold."""

__version__ = "0.1.0"

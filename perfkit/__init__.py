"""Big integers, a pebble simulation and small performance-minded utilities."""

__version__ = "0.1.0"
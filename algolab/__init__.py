"""Classic algorithm exercises: closest pair, 8-puzzle search, load balancing and a diamond path."""

__version__ = "0.1.0"
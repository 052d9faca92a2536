"""Gear stat arithmetic, attack-power heuristics and pruning of outclassed items."""

__version__ = "0.1.0"
__all__ = ["heuristics", "items", "optimizer", "stats", "text"]
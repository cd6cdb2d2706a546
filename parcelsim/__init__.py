"""Discrete event simulation of packages routed between warehouses."""

__version__ = "0.1.0"
__all__ = ["cli", "network", "package", "reader", "scheduler"]
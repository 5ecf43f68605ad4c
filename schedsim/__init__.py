"""Cycle-by-cycle CPU scheduling, resource-access and synchronization simulator."""

__version__ = "0.1.0"
"""CLI helpers exposed for other modules."""

from .ui import StepTracker, select_with_arrows

__all__ = ["StepTracker", "select_with_arrows"]

"""Mini README: Selection state shared by preview drivers and the exporter."""

from .model import SelectionModel, recommended_selection, reconcile

__all__ = ["SelectionModel", "recommended_selection", "reconcile"]

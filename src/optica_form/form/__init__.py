"""Form model: current values, derived region and per-field outcomes."""

from .model import FormModel, FormValues

__all__ = ["FormModel", "FormValues"]

"""Optica Form — appointment request form validation.

Validates a contact/appointment request field by field, derives the Spanish
province from the postal code, and turns a submission into either an ordered
list of error messages or a display-ready confirmation summary.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"

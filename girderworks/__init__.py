"""Component-based objects, scenes and behaviours for a girder-climbing arcade platformer."""

__version__ = "0.1.0"
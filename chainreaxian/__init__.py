"""An arcade shooter in which burning aliens set off chain reactions, with a pygame window."""

__version__ = "0.1.0"
"""EEZ boundary monitoring: vessel safety status and distance to the EEZ edge."""

__version__ = "0.1"

"""Portfolio projection and Guyton-Klinger withdrawal simulation."""

__version__ = "0.1.0"

"""solidctl: runnable good/bad pairs for the five SOLID design principles."""

__version__ = "0.1.0"

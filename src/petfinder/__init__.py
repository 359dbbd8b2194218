"""petfinder — interactive command-line pet adoption shelter."""

__version__ = "0.1.0"

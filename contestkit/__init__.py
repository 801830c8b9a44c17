"""Classic programming-contest algorithms in plain Python, with a command line front end."""

__version__ = "0.1.0"
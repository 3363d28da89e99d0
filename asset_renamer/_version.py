__version__ = "20261016"

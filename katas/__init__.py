"""Small programming exercises with tested solutions, one module per exercise."""

__version__ = "0.1.0"
"""Region density table: CSV city statistics -> relative-density fixed-width report."""

__version__ = "0.1.0"

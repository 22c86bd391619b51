"""Enrich token lists with colors taken from each token's logo."""

__version__ = "1.0.0"

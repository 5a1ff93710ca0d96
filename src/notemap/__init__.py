"""Notemap - map Markdown note vaults onto static site routes."""

__version__ = "0.1.0"

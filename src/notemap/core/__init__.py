"""Core path, route and tree handling for note vaults."""

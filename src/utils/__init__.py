"""Utilities package for unicon: configuration, validation, logging setup and CLI."""

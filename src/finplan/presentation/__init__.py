"""Presentation layer: HTTP app factory and command-line interface."""

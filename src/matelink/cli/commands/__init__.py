"""Subcommands for the matelink CLI."""

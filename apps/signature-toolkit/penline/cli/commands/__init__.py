"""Subcommands registered with the Penline CLI."""

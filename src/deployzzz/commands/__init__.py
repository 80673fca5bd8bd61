"""Typer sub-applications, one per command group."""

"""Command line interface for pillcolor."""

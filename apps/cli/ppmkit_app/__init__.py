"""Command-line app for ppmkit."""

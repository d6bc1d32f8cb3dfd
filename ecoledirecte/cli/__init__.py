"""Command-line interface for the ecoledirecte client."""

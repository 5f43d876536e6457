"""Post workflows used by the CLI."""

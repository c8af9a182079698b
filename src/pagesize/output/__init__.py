"""Result formatting for the CLI."""

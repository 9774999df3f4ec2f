"""Built-in CLI plugins."""

"""Counter demo application state."""

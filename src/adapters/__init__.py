"""Entry-point adapters (web interface and command-line tools)."""

"""Top-level landingkit commands (one module per command)."""

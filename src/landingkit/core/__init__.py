"""Core building blocks: config, templating, site generation and validation."""

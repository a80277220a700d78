"""pwctl — secure password generation and composition-policy validation."""

__version__ = "0.1.0"

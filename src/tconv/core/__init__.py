"""Core transcript model and provider conversion."""

"""Geographic helpers and constants."""

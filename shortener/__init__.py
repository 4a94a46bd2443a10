"""In-memory URL shortening service."""

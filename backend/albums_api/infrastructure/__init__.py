"""Infrastructure Layer — logging setup and HTTP middleware."""

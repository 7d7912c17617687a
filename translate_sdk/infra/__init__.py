"""Infrastructure: HTTP transport and logging."""

"""Core application plumbing: configuration and logging."""

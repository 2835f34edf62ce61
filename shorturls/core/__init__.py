"""Core configuration and logging for the URL shortener."""

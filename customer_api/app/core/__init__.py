"""Configuration, logging, persistence setup and error types."""

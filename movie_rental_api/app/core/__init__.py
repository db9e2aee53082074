"""Configuration, logging, security and storage helpers."""

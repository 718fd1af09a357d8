"""Shared infrastructure for the markup pipeline: logging and configuration."""

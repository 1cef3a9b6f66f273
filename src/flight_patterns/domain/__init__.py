"""Core domain models for the flight patterns playground."""

"""Technical infrastructure: logging, singleton patterns and in-memory storage."""

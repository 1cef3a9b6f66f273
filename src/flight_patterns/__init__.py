"""Flight Patterns - design pattern playground.

A toy airline domain used to demonstrate classic object-oriented patterns:

Key Components:
    - domain.passenger: pricing profiles (decorator), baggage eligibility
      (adapter) and extra baggage pricing (factory)
    - application.friends: process-wide friends list (singleton)
    - cli: command line interface over both

Usage:
    >>> flight-patterns passengers list
    >>> flight-patterns passengers quote --wrap economic --wrap business --extra-kg 10
    >>> flight-patterns friends list --format table
"""

__version__ = "1.0.0"
__package_name__ = "flight-patterns"

"""diskmoose - warns logged-in users when a partition runs out of space."""

__version__ = "0.2.0"

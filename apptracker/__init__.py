"""Job application tracker backend."""

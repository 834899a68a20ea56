"""Node chain core: the chain itself, its configuration, errors and types."""

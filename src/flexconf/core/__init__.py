"""Core building blocks: the configuration store, loaders and shared utilities."""

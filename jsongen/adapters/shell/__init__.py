"""Shell adapters — external processes and the local filesystem."""

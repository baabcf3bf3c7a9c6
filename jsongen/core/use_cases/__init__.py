"""Use cases — generation and cleanup orchestration."""

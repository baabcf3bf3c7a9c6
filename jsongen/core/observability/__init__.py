"""Observability — logging setup and the output transcript."""

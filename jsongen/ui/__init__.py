"""User interfaces for jsongen."""

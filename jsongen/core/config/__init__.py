"""Configuration — settings file and naming-convention lookup."""

"""CLI command groups, registered on the root group in ``jsongen.main``."""

"""jsongen — run dart_json_gen and clean up what it generated."""

__version__ = "0.1.0"

"""Core engine — target resolution, tool discovery, artifact discovery."""

"""Engine services — tool discovery, target resolution, artifact scanning."""

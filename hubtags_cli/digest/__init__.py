"""Tag acquisition and digest pipeline."""

"""Command-line interface for inspecting serialized buckets."""

"""Cross-cutting utilities shared by every layer."""

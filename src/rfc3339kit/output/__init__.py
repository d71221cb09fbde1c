"""Output layer — human and JSON rendering of ParseResult."""

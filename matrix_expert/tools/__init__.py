"""JSON stdin/stdout plugin tools built on the matrix core."""

"""Small pure helpers shared across postkit."""

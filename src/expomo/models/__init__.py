"""Domain models for ExPomo."""

"""Application layer: queries orchestrating the analytics domain."""

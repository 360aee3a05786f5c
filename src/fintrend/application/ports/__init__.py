"""Application ports (interfaces to outside collaborators)."""

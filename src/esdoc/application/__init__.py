"""Application layer: ports and document factories."""

"""API package containing versioned routes."""

"""API routers for the SEMF service."""

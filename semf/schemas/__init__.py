"""Pydantic request/response schemas for the SEMF API."""

"""Static reference data for the SEMF test form."""

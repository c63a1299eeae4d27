"""Output layer — rich and JSON rendering of parse results."""

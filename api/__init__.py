"""HTTP API for the freezer batch calculator."""

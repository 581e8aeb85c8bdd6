"""HTTP clients for upstream weather services."""

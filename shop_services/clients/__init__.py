"""HTTP clients for calling peer services."""

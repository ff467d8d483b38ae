"""Response normalization for the products API."""

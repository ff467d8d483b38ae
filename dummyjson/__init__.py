"""Client for the dummyjson products API."""

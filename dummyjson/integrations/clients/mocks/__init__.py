"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- we want to test code that depends on a ProductsClient without the network
- the products API is unavailable

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to dummyjson/integrations/contracts/*
"""

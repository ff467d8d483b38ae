"""
Real HTTP integration clients.

These clients communicate with the products API over HTTP.

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to dummyjson/integrations/contracts/*
"""

"""
Accounts module - caller identities and ranks.

This module handles:
- Account entity and domain logic
- Token to rank resolution for the authorization gate
- Account creation
"""

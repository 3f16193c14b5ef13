"""
Licenses module - IP-locked license management.

This module handles:
- License entity and lifecycle (create, claim, activate, suspend, delete)
- Key generation and authentication rules
- The lifecycle engine used by the HTTP API
"""

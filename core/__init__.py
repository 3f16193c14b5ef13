"""
Core module shared by the accounts and licenses apps.

Holds the domain primitives (events, exceptions, value objects, key
generation), the operation result type, the store and event-bus
infrastructure, HTTP middleware, metrics and health views.
"""

"""
Store Domain

Stores, their accounts and categories, the status state machine and the
lifecycle events published on every mutation.
"""

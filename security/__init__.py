"""
security/ - Access Control
==========================
Handler decorators for the user whitelist and inbound rate limiting.
"""

"""
repositories/ - Data Access Layer
==================================
Each repository owns the in-memory state for a specific domain entity.
Repositories receive normalized provider records and return domain model objects.
"""

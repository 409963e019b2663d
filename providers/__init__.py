"""
providers/ - External Data Layer
=================================
HTTP clients for the third-party APIs (news, weather, quotes) and the
adapters that map their JSON into domain models.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
delegates to the UpdateRouter, and sends the resulting messages back to the chat.
No business logic lives here.
"""

# Keys under Application.bot_data
ROUTER_KEY = "router"
CATALOG_KEY = "catalog"
HTTP_CLIENT_KEY = "http_client"

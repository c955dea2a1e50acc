"""
security/ - Access control and rate limiting for Telegram handlers.
"""

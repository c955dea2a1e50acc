"""
handlers/ - Telegram Commands
=============================
One module per feature (plans, bills, transactions, dashboard, export).
Handlers parse command arguments, call a service, and reply in the
user's language. Expected failures become localized replies via
`handlers.common.replies_errors`.
"""

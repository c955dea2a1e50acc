"""
utils/ - Cross-cutting helpers: logging, clock, dates, errors, localized texts.
"""

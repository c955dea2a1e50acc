"""
parsers/ - Text Input Parsing
=============================
Turns free-form chat messages into structured transaction drafts.
"""

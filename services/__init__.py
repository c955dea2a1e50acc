"""
services/ - Business Logic Layer
================================
Services load a user's snapshot, run the engine over it, apply changes
and persist through the repository. Time is read through an injected Clock.
"""

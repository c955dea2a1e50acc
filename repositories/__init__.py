"""
repositories/ - Data Access Layer
==================================
Repositories encapsulate all SQL for the stored user state.
They read JSONB blobs from the database and return domain model objects.
"""

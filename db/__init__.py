"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool and schema initialization.
User state is stored as JSONB blobs; repositories build on this layer.
"""

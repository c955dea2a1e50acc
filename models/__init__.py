"""
models/ - Domain Layer
======================
Immutable records for profiles, bills, transactions and budget plans.
Each record knows how to read and write its slice of the stored JSON blob.
"""

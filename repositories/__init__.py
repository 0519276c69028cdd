"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all queries for a specific MongoDB collection.
Repositories receive raw documents from the database and return domain model objects.
"""

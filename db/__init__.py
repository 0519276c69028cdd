"""
db/ - Database Layer
====================
Owns the MongoDB client and the bootstrap of the uniqueness indexes.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

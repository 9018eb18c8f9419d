"""Domain models and entities.

Pure data structures (Pydantic v2) and in-memory collections. The domain
does not know about files, terminals or the CLI.
"""

"""Ambient infrastructure: errors, logging, settings, caching, hashing and ORM."""

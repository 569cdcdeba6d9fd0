"""
Domain layer - Core business entities and domain logic.

This layer contains the employee entities and the exception taxonomy,
independent of any infrastructure or framework concerns.
"""

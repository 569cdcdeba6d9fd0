"""
Service layer - business operations over the employee directory.
"""

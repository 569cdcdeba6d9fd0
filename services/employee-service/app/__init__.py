"""
Employee Service Package.

FastAPI facade exposing employee directory operations on top of a remote
employee directory API.
"""

__version__ = "1.0.0"
__description__ = "Employee directory facade service"

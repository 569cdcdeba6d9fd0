"""
Infrastructure layer - clients for external systems.
"""

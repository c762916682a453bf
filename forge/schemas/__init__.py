"""
Request schemas for the Quest Forge API.
"""

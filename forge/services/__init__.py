"""
Quest Forge services.
"""

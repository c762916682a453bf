"""
Pipeline functions: stateless orchestration over services and the
session repository. Routers call these; they never touch storage directly.
"""

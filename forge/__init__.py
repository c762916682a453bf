"""
Quest Forge: gamified goal tracking with quests, levels, achievements
and generated learning paths.
"""

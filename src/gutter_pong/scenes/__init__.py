"""
Scenes for Gutter Pong.
"""

"""
Services supporting the game loop.
"""

"""
Artist/event association resource: /artistas-eventos.
"""

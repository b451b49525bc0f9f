"""
Artist resource: /artistas.
"""

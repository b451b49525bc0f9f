"""
Event resource: /eventos.
"""

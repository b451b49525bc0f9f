"""
Ticket resource: /ingressos.
"""

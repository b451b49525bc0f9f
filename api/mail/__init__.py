"""
Transactional e-mail endpoint: /mail/send.
"""

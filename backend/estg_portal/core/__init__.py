"""
Core - Flask extensions shared by the whole application (CSRF, rate limiting, compression).
"""

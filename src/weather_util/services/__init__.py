"""
Shared service utilities.

- http.py - pre-configured ``requests.Session`` (User-Agent, default timeout)
"""

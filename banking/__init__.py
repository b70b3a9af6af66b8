"""
Banking records service: customers, their accounts and staff logins.
"""

__version__ = "1.0.0"

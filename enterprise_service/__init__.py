"""
Enterprise Service

Administrative backend providing:
- Admin account management
- Enterprise records with per-enterprise settings
- JWT authentication (register, login, verify, refresh)
- Best-effort event notifications over Redis
"""

__version__ = "1.0.0"

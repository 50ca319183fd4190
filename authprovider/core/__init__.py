"""Core authentication logic.

Module Structure:
    - provider.py   : AuthProvider / Token interfaces
    - token.py      : VerifiedToken value object
    - roles.py      : Role-set helpers and role claim decoding
    - exceptions.py : Typed exceptions
    - factory.py    : Provider selection from settings
    - firebase/     : Firebase Authentication backend

Usage:
    from authprovider.core.factory import create_auth_provider

    provider = create_auth_provider()
    token = provider.verify_token(raw)
    roles, present = token.get_roles()
"""

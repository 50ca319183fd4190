"""Firebase Authentication backend.

- client.py: FirebaseIdentityClient over firebase_admin.auth, app bootstrap
- auth.py: FirebaseAuth, the AuthProvider facade
"""
from .client import FirebaseIdentityClient, IdentityUser, initialize_firebase_app
from .auth import FirebaseAuth

__all__ = [
    "FirebaseAuth",
    "FirebaseIdentityClient",
    "IdentityUser",
    "initialize_firebase_app",
]

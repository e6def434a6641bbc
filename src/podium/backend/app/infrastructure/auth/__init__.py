from podium.backend.app.infrastructure.auth.firebase_identity import FirebaseIdentityProvider

__all__ = ['FirebaseIdentityProvider']

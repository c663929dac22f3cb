from asset_verification.services.verification.verification_service import VerificationService

__all__ = ['VerificationService']

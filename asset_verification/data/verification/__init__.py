"""
Verification models

- VerificationCycle: one attestation campaign; at most one is active at a time
- VerificationRecord: append-only attestation of one asset by one employee in one cycle
"""

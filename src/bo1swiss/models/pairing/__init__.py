from bo1swiss.models.pairing.pairing_result import PairingResult

__all__ = ["PairingResult"]

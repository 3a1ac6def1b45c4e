from .walker import WalkerProtocol

__all__ = ['WalkerProtocol']

"""Hash functions: Keccak-256."""

from .keccak import keccak256

__all__: tuple[str, ...] = ("keccak256",)

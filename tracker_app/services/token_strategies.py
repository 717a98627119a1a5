"""
Token generation strategies for tracking links.
Uses Strategy Pattern to allow different random sources.
"""

import random
import secrets
import string
from abc import ABC, abstractmethod
from typing import Optional


class TokenStrategy(ABC):
    """
    Abstract base class for token generation strategies.
    
    Tokens are drawn per character from [A-Za-z0-9]. No uniqueness check is
    made here: the UNIQUE constraint on tracking_links.token rejects a
    collision at insert time.
    """
    
    ALPHABET = string.ascii_letters + string.digits
    
    def __init__(self, length: int = 16):
        self.length = length
    
    def generate(self, length: Optional[int] = None) -> str:
        """
        Generate a token.
        
        Args:
            length: Number of characters (defaults to the strategy's length)
            
        Returns:
            A token string of exactly `length` characters
        """
        if length is None:
            length = self.length
        return ''.join(self._choice(self.ALPHABET) for _ in range(length))
    
    @abstractmethod
    def _choice(self, alphabet: str) -> str:
        """Pick one character from the alphabet"""
        pass


class RandomTokenStrategy(TokenStrategy):
    """
    Plain pseudo-random tokens (random module).
    
    Pros: Fast, no extra entropy source
    Cons: Not suitable where tokens must be unguessable
    """
    
    def _choice(self, alphabet: str) -> str:
        return random.choice(alphabet)


class SecretTokenStrategy(TokenStrategy):
    """Cryptographically strong tokens (secrets module), same format"""
    
    def _choice(self, alphabet: str) -> str:
        return secrets.choice(alphabet)

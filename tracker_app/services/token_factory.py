"""
Factory for creating token generation strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from tracker_app.services.token_strategies import (
    TokenStrategy,
    RandomTokenStrategy,
    SecretTokenStrategy
)
from tracker_app.config import settings


class TokenStrategyType(Enum):
    """Available token generation strategies"""
    RANDOM = "random"
    SECRETS = "secrets"


class TokenFactory:
    """Factory for creating token generation strategies with caching"""
    
    _instances = {}  # Cache for strategy instances
    
    @classmethod
    def create_strategy(
        cls,
        strategy_type: TokenStrategyType = None
    ) -> TokenStrategy:
        """
        Create or return cached token generation strategy.
        
        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
        
        Returns:
            A cached instance of a TokenStrategy
        
        Raises:
            ValueError: If strategy_type is unknown
        """
        if strategy_type is None:
            strategy_type = TokenStrategyType(settings.token_strategy)
        
        if strategy_type in cls._instances:
            return cls._instances[strategy_type]
        
        if strategy_type == TokenStrategyType.RANDOM:
            instance = RandomTokenStrategy(length=settings.token_length)
        elif strategy_type == TokenStrategyType.SECRETS:
            instance = SecretTokenStrategy(length=settings.token_length)
        else:
            raise ValueError(f"Unknown strategy type: {strategy_type}")
        
        cls._instances[strategy_type] = instance
        return instance

"""
Tests for token generation strategies.
"""
import string

from tracker_app.services.token_strategies import (
    RandomTokenStrategy,
    SecretTokenStrategy
)
from tracker_app.services.token_factory import (
    TokenFactory,
    TokenStrategyType
)

ALPHABET = set(string.ascii_letters + string.digits)


class TestRandomTokenStrategy:
    """Test the default random strategy"""

    def test_default_length(self):
        token = RandomTokenStrategy().generate()
        assert len(token) == 16

    def test_alphabet(self):
        strategy = RandomTokenStrategy()
        for _ in range(50):
            assert set(strategy.generate()) <= ALPHABET

    def test_explicit_length(self):
        strategy = RandomTokenStrategy(length=16)
        assert len(strategy.generate(8)) == 8
        assert len(strategy.generate(32)) == 32

    def test_tokens_vary(self):
        strategy = RandomTokenStrategy()
        assert len({strategy.generate() for _ in range(100)}) == 100


class TestSecretTokenStrategy:
    """Test the secrets-backed strategy keeps the same format"""

    def test_format(self):
        token = SecretTokenStrategy(length=16).generate()
        assert len(token) == 16
        assert set(token) <= ALPHABET


class TestTokenFactory:
    """Test strategy factory"""

    def test_creates_random_strategy(self):
        strategy = TokenFactory.create_strategy(TokenStrategyType.RANDOM)
        assert isinstance(strategy, RandomTokenStrategy)

    def test_creates_secrets_strategy(self):
        strategy = TokenFactory.create_strategy(TokenStrategyType.SECRETS)
        assert isinstance(strategy, SecretTokenStrategy)

    def test_returns_cached_instance(self):
        first = TokenFactory.create_strategy(TokenStrategyType.RANDOM)
        second = TokenFactory.create_strategy(TokenStrategyType.RANDOM)
        assert first is second

    def test_creates_default_from_settings(self):
        strategy = TokenFactory.create_strategy()
        # Random by default
        assert isinstance(strategy, RandomTokenStrategy)
        assert strategy.length == 16

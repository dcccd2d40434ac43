"""
Tests for rabin_lab core models.

Note: The order of validations in models.py matters!
Tests are designed to trigger specific errors while avoiding
earlier validations in the chain.
"""

import pytest
from rabin_lab.core.models import RabinKey, RabinPublicKey, RoundTripSample
from rabin_lab.exceptions import InvalidModulusError


class TestRabinPublicKey:
    """Tests for RabinPublicKey validation."""

    def test_valid_key_creation(self):
        key = RabinPublicKey(n=77)
        assert key.n == 77

    @pytest.mark.parametrize("n", [0, -77])
    def test_non_positive_modulus_raises_error(self, n):
        with pytest.raises(InvalidModulusError, match="[Mm]odulus.*positive"):
            RabinPublicKey(n=n)

    def test_even_modulus_raises_error(self):
        """n is a product of two odd primes, so it must be odd."""
        with pytest.raises(ValueError, match="[Mm]odulus.*odd"):
            RabinPublicKey(n=76)

    def test_key_is_immutable(self):
        key = RabinPublicKey(n=77)
        with pytest.raises(AttributeError):
            key.n = 79


class TestRabinKey:
    """Tests for full RabinKey validation."""

    # Valid test key: p=7, q=11, n=77
    VALID_KEY = {
        'n': 77,
        'p': 7,
        'q': 11
    }

    def test_valid_key_creation(self):
        key = RabinKey(**self.VALID_KEY)
        assert key.n == 77
        assert key.p == 7
        assert key.q == 11

    def test_public_key_extraction(self):
        """Test that public_key property returns correct RabinPublicKey."""
        key = RabinKey(**self.VALID_KEY)
        pub = key.public_key
        assert isinstance(pub, RabinPublicKey)
        assert pub.n == key.n

    def test_keys_compare_by_value(self):
        assert RabinKey(**self.VALID_KEY) == RabinKey(n=77, p=7, q=11)
        assert RabinKey(**self.VALID_KEY) != RabinKey(n=77, p=11, q=7)

    def test_wrong_modulus_raises_error(self):
        params = self.VALID_KEY.copy()
        params['n'] = 79
        with pytest.raises(ValueError, match="[Mm]odulus.*equal.*product"):
            RabinKey(**params)

    def test_non_positive_modulus_raises_error(self):
        with pytest.raises(InvalidModulusError, match="[Mm]odulus.*positive"):
            RabinKey(n=-77, p=7, q=11)

    @pytest.mark.parametrize("p", [0, -7])
    def test_non_positive_first_factor_raises_error(self, p):
        with pytest.raises(InvalidModulusError, match="[Ff]irst prime factor.*positive"):
            RabinKey(n=77, p=p, q=11)

    @pytest.mark.parametrize("q", [0, -11])
    def test_non_positive_second_factor_raises_error(self, q):
        with pytest.raises(InvalidModulusError, match="[Ss]econd prime factor.*positive"):
            RabinKey(n=77, p=7, q=q)

    def test_equal_primes_raises_error(self):
        with pytest.raises(ValueError, match="prime factor.*different"):
            RabinKey(n=49, p=7, q=7)

    def test_first_prime_not_blum_raises_error(self):
        """5 is prime but congruent to 1 mod 4."""
        with pytest.raises(ValueError, match="[Ff]irst prime.*3 mod 4"):
            RabinKey(n=55, p=5, q=11)

    def test_second_prime_not_blum_raises_error(self):
        with pytest.raises(ValueError, match="[Ss]econd prime.*3 mod 4"):
            RabinKey(n=91, p=7, q=13)

    def test_non_prime_p_raises_error(self):
        """15 is congruent to 3 mod 4 but not prime."""
        with pytest.raises(ValueError, match="[Ff]irst prime.*not prime"):
            RabinKey(n=15 * 11, p=15, q=11)

    def test_non_prime_q_raises_error(self):
        with pytest.raises(ValueError, match="[Ss]econd prime.*not prime"):
            RabinKey(n=7 * 15, p=7, q=15)

    def test_large_valid_key(self):
        """Two Mersenne primes, both congruent to 3 mod 4."""
        p, q = 2 ** 61 - 1, 2 ** 127 - 1
        key = RabinKey(n=p * q, p=p, q=q)
        assert key.public_key.n == p * q


class TestRoundTripSample:
    """Tests for RoundTripSample validation."""

    def test_valid_sample_creation(self):
        sample = RoundTripSample(message=20, ciphertext=15, recovered=True, decryption_time=0.001)
        assert sample.message == 20
        assert sample.ciphertext == 15
        assert sample.recovered is True
        assert sample.decryption_time == 0.001

    def test_zero_values_allowed(self):
        sample = RoundTripSample(message=0, ciphertext=0, recovered=True, decryption_time=0.0)
        assert sample.decryption_time == 0.0

    def test_negative_message_raises_error(self):
        with pytest.raises(ValueError, match="[Mm]essage.*negative"):
            RoundTripSample(message=-1, ciphertext=15, recovered=False, decryption_time=0.001)

    def test_negative_ciphertext_raises_error(self):
        with pytest.raises(ValueError, match="[Cc]iphertext.*negative"):
            RoundTripSample(message=20, ciphertext=-1, recovered=False, decryption_time=0.001)

    def test_negative_time_raises_error(self):
        with pytest.raises(ValueError, match="[Dd]ecryption time.*negative"):
            RoundTripSample(message=20, ciphertext=15, recovered=True, decryption_time=-0.5)

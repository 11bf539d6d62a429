"""
Tests for the secret storing strategies.
"""

import hashlib
import secrets
from types import SimpleNamespace

import pytest

from authkeeper.errors import (
    ConfigurationError,
    ErrorCode,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from authkeeper.secret_storing import (
    Encrypted,
    Pbkdf2Hash,
    Plain,
    SecretStrategy,
    SecretUsage,
    Sha256Hash,
    available_strategies,
    build_strategy,
    register_strategy,
)
from authkeeper.secret_storing import registry
from authkeeper.secret_storing.pbkdf2_hash import MAX_ITERATIONS
from authkeeper.util.encoding import secure_compare


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


@pytest.fixture
def encryption_key():
    return Encrypted.generate_key()


@pytest.fixture(params=["plain", "sha256_hash", "encrypted", "pbkdf2_hash"])
def strategy(request):
    """Every shipped strategy, cheap to run."""
    if request.param == "encrypted":
        return Encrypted(Encrypted.generate_key())
    if request.param == "pbkdf2_hash":
        return Pbkdf2Hash(iterations=1000)
    return build_strategy(request.param)


class TestStrategyContract:
    """Behaviour shared by every strategy"""

    def test_transformed_secret_matches(self, strategy):
        """A secret matches its own stored value"""
        stored = strategy.transform_secret("s3cr3t-value")
        assert strategy.secret_matches("s3cr3t-value", stored) is True

    def test_different_secrets_do_not_match(self, strategy):
        """No false positives over a sample of random secrets"""
        for _ in range(20):
            first = secrets.token_urlsafe(24)
            second = secrets.token_urlsafe(24)
            assert strategy.secret_matches(first, strategy.transform_secret(second)) is False

    @pytest.mark.parametrize("input,stored", [
        (None, "stored"),
        ("", "stored"),
        ("input", None),
        ("input", ""),
        (None, None),
        ("", ""),
    ])
    def test_nothing_to_compare_is_not_a_match(self, strategy, input, stored):
        """Empty or missing values never match and never raise"""
        assert strategy.secret_matches(input, stored) is False

    def test_empty_input_against_transformed_empty_string(self, strategy):
        """An empty presented secret is rejected even against its own transform"""
        stored = strategy.transform_secret("")
        assert strategy.secret_matches("", stored) is False

    def test_unknown_usage_is_rejected(self, strategy):
        """validate_for names the offending usage"""
        with pytest.raises(InvalidArgumentError, match="can not be used for wat"):
            strategy.validate_for("wat")

    def test_unknown_usage_error_is_value_error(self, strategy):
        with pytest.raises(ValueError) as exc_info:
            strategy.validate_for("wat")
        assert exc_info.value.error_code == ErrorCode.INVALID_ARGUMENT
        assert exc_info.value.details["value"] == "wat"

    def test_restore_matches_capability_flag(self, strategy):
        """allows_restoring_secrets tells whether restore_secret works"""
        resource = SimpleNamespace(secret=strategy.transform_secret("plain-text"))

        if strategy.allows_restoring_secrets():
            assert strategy.restore_secret(resource, "secret") == "plain-text"
        else:
            with pytest.raises(UnsupportedOperationError):
                strategy.restore_secret(resource, "secret")

    def test_store_secret_assigns_attribute(self, strategy):
        """store_secret writes the stored value onto the resource"""
        resource = SimpleNamespace(token=None)
        stored = strategy.store_secret(resource, "token", "fresh-token")

        assert resource.token == stored
        assert strategy.secret_matches("fresh-token", resource.token) is True

    def test_strategies_share_the_contract(self, strategy):
        assert isinstance(strategy, SecretStrategy)


class TestPlain:
    """Test the plain strategy"""

    def test_transform_is_identity(self):
        assert Plain().transform_secret("foo") == "foo"

    def test_allows_restoring(self):
        assert Plain().allows_restoring_secrets() is True

    def test_restore_reads_attribute(self):
        resource = SimpleNamespace(token="abc")
        assert Plain().restore_secret(resource, "token") == "abc"

    def test_validate_for_both_usages(self):
        strategy = Plain()
        assert strategy.validate_for("token") is True
        assert strategy.validate_for(SecretUsage.APPLICATION) is True

    def test_secret_matches(self):
        assert Plain().secret_matches("a", "a") is True
        assert Plain().secret_matches("a", "b") is False
        assert Plain().secret_matches("a", "ab") is False


class TestSha256Hash:
    """Test the SHA-256 strategy"""

    def test_transform_secret(self):
        """Stored value is the lowercase hex SHA-256 digest"""
        assert Sha256Hash().transform_secret("foo") == sha256_hex("foo")
        assert Sha256Hash().transform_secret("foo") == (
            "2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"
        )

    def test_transform_is_deterministic(self):
        assert Sha256Hash().transform_secret("x") == Sha256Hash().transform_secret("x")

    def test_restore_secret_raises(self):
        with pytest.raises(UnsupportedOperationError):
            Sha256Hash().restore_secret(SimpleNamespace(token="t"), "token")

    def test_restore_secret_raises_not_implemented(self):
        """Callers catching the builtin type see the failure too"""
        with pytest.raises(NotImplementedError):
            Sha256Hash().restore_secret(SimpleNamespace(token="t"), "token")

    def test_does_not_allow_restoring(self):
        assert Sha256Hash().allows_restoring_secrets() is False

    def test_validate_for_valid_usages(self):
        assert Sha256Hash().validate_for("application") is True
        assert Sha256Hash().validate_for("token") is True

    def test_validate_for_invalid_usage(self):
        with pytest.raises(InvalidArgumentError, match="sha256_hash can not be used for wat"):
            Sha256Hash().validate_for("wat")

    def test_secret_matches_compares_with_transform(self):
        """The plaintext is not accepted in place of its digest"""
        assert Sha256Hash().secret_matches("input", "input") is False
        assert Sha256Hash().secret_matches("a", sha256_hex("a")) is True

    def test_str_names_strategy(self):
        assert str(Sha256Hash()) == "sha256_hash"


class TestEncrypted:
    """Test the Fernet-backed strategy"""

    def test_transform_hides_plaintext(self, encryption_key):
        stored = Encrypted(encryption_key).transform_secret("secret")
        assert stored != "secret"
        assert "secret" not in stored

    def test_transform_is_randomized_but_matches(self, encryption_key):
        """Two encryptions differ; both match the same plaintext"""
        strategy = Encrypted(encryption_key)
        first = strategy.transform_secret("secret")
        second = strategy.transform_secret("secret")

        assert first != second
        assert strategy.secret_matches("secret", first) is True
        assert strategy.secret_matches("secret", second) is True

    def test_restore_secret(self, encryption_key):
        strategy = Encrypted(encryption_key)
        resource = SimpleNamespace(token=strategy.transform_secret("tok"))
        assert strategy.restore_secret(resource, "token") == "tok"

    def test_restore_tampered_value_raises(self, encryption_key):
        strategy = Encrypted(encryption_key)
        with pytest.raises(InvalidArgumentError):
            strategy.restore_secret(SimpleNamespace(token="not-a-fernet-token"), "token")

    def test_allows_restoring(self, encryption_key):
        assert Encrypted(encryption_key).allows_restoring_secrets() is True

    @pytest.mark.parametrize("stored", ["garbage", "é-not-ascii", "gAAAAA"])
    def test_undecryptable_value_does_not_match(self, encryption_key, stored):
        assert Encrypted(encryption_key).secret_matches("secret", stored) is False

    def test_value_from_other_key_does_not_match(self):
        stored = Encrypted(Encrypted.generate_key()).transform_secret("secret")
        assert Encrypted(Encrypted.generate_key()).secret_matches("secret", stored) is False

    def test_key_rotation(self):
        """Values written under an older key remain readable"""
        old_key = Encrypted.generate_key()
        new_key = Encrypted.generate_key()
        stored = Encrypted(old_key).transform_secret("secret")

        rotated = Encrypted([new_key, old_key])
        assert rotated.secret_matches("secret", stored) is True

        fresh = rotated.transform_secret("secret")
        assert Encrypted(new_key).secret_matches("secret", fresh) is True
        assert Encrypted(old_key).secret_matches("secret", fresh) is False

    def test_from_passphrase_is_stable(self):
        """Same passphrase and salt derive the same key"""
        first = Encrypted.from_passphrase("correct horse", "salt", iterations=1000)
        second = Encrypted.from_passphrase("correct horse", "salt", iterations=1000)
        assert second.secret_matches("secret", first.transform_secret("secret")) is True

    def test_invalid_key(self):
        with pytest.raises(ConfigurationError, match="Invalid encryption key"):
            Encrypted("too-short")

    def test_no_keys(self):
        with pytest.raises(ConfigurationError):
            Encrypted([])

    def test_repr_hides_keys(self, encryption_key):
        assert encryption_key not in repr(Encrypted(encryption_key))


class TestPbkdf2Hash:
    """Test the salted PBKDF2 strategy"""

    @pytest.fixture
    def strategy(self):
        return Pbkdf2Hash(iterations=1000)

    def test_stored_format(self, strategy):
        algorithm, iterations, salt, digest = strategy.transform_secret("secret").split("$")
        assert algorithm == "pbkdf2_sha256"
        assert iterations == "1000"
        assert salt and digest

    def test_transform_is_salted(self, strategy):
        assert strategy.transform_secret("secret") != strategy.transform_secret("secret")

    def test_matches_value_stored_with_other_iterations(self, strategy):
        """The iteration count is read from the stored value"""
        stored = Pbkdf2Hash(iterations=2000).transform_secret("secret")
        assert strategy.secret_matches("secret", stored) is True

    @pytest.mark.parametrize("stored", [
        "nope",
        "md5$1000$c2FsdA$ZGlnZXN0",
        "pbkdf2_sha256$many$c2FsdA$ZGlnZXN0",
        "pbkdf2_sha256$0$c2FsdA$ZGlnZXN0",
        "pbkdf2_sha256$1000$$ZGlnZXN0",
        "pbkdf2_sha256$1000$c2FsdA$ZGlnZXN0",
        "pbkdf2_sha256$99999999999999999999999$c2FsdA$ZGlnZXN0",
        "pbkdf2_sha256$10000000000$c2FsdA$ZGlnZXN0",
        b"\xff\xfe",
        12345,
    ])
    def test_malformed_stored_value(self, strategy, stored):
        assert strategy.secret_matches("secret", stored) is False

    def test_refuses_tokens(self, strategy):
        with pytest.raises(InvalidArgumentError, match="only be used for storing application secrets"):
            strategy.validate_for(SecretUsage.TOKEN)

    def test_accepts_applications(self, strategy):
        assert strategy.validate_for("application") is True

    def test_does_not_allow_restoring(self, strategy):
        assert strategy.allows_restoring_secrets() is False

    def test_matches_bytes_stored_value(self, strategy):
        """Stored values read back as bytes verify like their text form"""
        stored = strategy.transform_secret("secret")
        assert strategy.secret_matches("secret", stored.encode("ascii")) is True
        assert strategy.secret_matches("other", stored.encode("ascii")) is False

    @pytest.mark.parametrize("iterations", [0, -1, "1000", 1.5, True, None, MAX_ITERATIONS + 1])
    def test_invalid_iterations(self, iterations):
        with pytest.raises(InvalidArgumentError, match="iterations must be an integer"):
            Pbkdf2Hash(iterations=iterations)

    def test_invalid_iterations_from_registry(self):
        with pytest.raises(InvalidArgumentError):
            build_strategy("pbkdf2_hash", iterations="1000")


class TestRegistry:
    """Test building strategies by name"""

    def test_available_strategies(self):
        assert available_strategies() == ["encrypted", "pbkdf2_hash", "plain", "sha256_hash"]

    def test_build_by_name(self):
        assert isinstance(build_strategy("plain"), Plain)
        assert isinstance(build_strategy(" SHA256_HASH "), Sha256Hash)

    def test_build_with_options(self, encryption_key):
        assert isinstance(build_strategy("encrypted", keys=[encryption_key]), Encrypted)

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Unknown secret strategy 'bcrypt'"):
            build_strategy("bcrypt")

    def test_missing_options(self):
        with pytest.raises(ConfigurationError, match="Invalid options"):
            build_strategy("encrypted")

    def test_register_strategy(self, monkeypatch):
        monkeypatch.setattr(registry, "_STRATEGIES", dict(registry._STRATEGIES))

        class Reversed(Plain):
            name = "reversed"

            def transform_secret(self, plain_secret):
                return plain_secret[::-1]

        register_strategy("reversed", Reversed)
        strategy = build_strategy("reversed")
        assert strategy.secret_matches("abc", "cba") is True


class TestSecureCompare:
    """Test the fixed-time comparison helper"""

    def test_equal(self):
        assert secure_compare("abc", "abc") is True
        assert secure_compare(b"abc", "abc") is True

    def test_different(self):
        assert secure_compare("abc", "abd") is False
        assert secure_compare("abc", "abcd") is False

    def test_non_string(self):
        assert secure_compare(None, "abc") is False
        assert secure_compare(123, 123) is False


class TestErrors:
    """Test error representations"""

    def test_to_dict(self):
        error = UnsupportedOperationError("nope", operation="restore_secret")
        assert error.to_dict() == {
            "error": "unsupported_operation",
            "message": "nope",
            "details": {"operation": "restore_secret"},
        }

    def test_configuration_error_cause(self):
        cause = ValueError("bad")
        error = ConfigurationError("broken", setting="secret_keys", cause=cause)
        assert error.to_dict()["cause"] == "bad"
        assert str(error) == "broken"

from modules.auth.passwords import DUMMY_HASH, hash_password, verify_password


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_each_hash_has_its_own_salt(self):
        """Hashing the same password twice yields different hashes."""
        assert hash_password("secret1") != hash_password("secret1")

    def test_verify_correct_password(self):
        assert verify_password("secret1", hash_password("secret1")) is True

    def test_verify_wrong_password(self):
        assert verify_password("secret2", hash_password("secret1")) is False

    def test_verify_against_garbage_hash(self):
        assert verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_long_password_is_accepted(self):
        """Passwords past bcrypt's 72-byte limit hash and verify."""
        password = "x" * 100
        assert verify_password(password, hash_password(password)) is True

    def test_dummy_hash_rejects_typical_input(self):
        assert verify_password("secret1", DUMMY_HASH) is False

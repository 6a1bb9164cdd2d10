"""Unit tests for auth_service module."""

import unittest
from unittest.mock import MagicMock
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from services.auth_service import (
    INVALID_CREDENTIALS,
    authenticate,
    hash_password,
    login_with_google,
    register,
    verify_password,
)
from adapter.fake.identity_verifier import FakeIdentityVerifier
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    InvalidAssertionError,
    StorageError,
    ValidationError,
)
from domain.model.user import Provider


class TestPasswordHashing(unittest.TestCase):
    """Test hash_password / verify_password."""

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password('secret123')

        self.assertNotEqual(hashed, 'secret123')
        self.assertTrue(hashed.startswith('$2'))
        self.assertTrue(verify_password('secret123', hashed))

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password('secret123')
        self.assertFalse(verify_password('wrong', hashed))

    def test_same_password_hashes_differently(self):
        """A fresh salt is used for every hash."""
        self.assertNotEqual(hash_password('secret123'), hash_password('secret123'))

    def test_verify_against_missing_hash_is_false(self):
        self.assertFalse(verify_password('secret123', None))
        self.assertFalse(verify_password('secret123', ''))

    def test_verify_against_garbage_hash_is_false(self):
        self.assertFalse(verify_password('secret123', 'not-a-bcrypt-hash'))

    def test_overlong_password_is_rejected_not_raised(self):
        """bcrypt 5 raises on inputs over 72 bytes; older releases truncate."""
        hashed = hash_password('secret123')
        self.assertFalse(verify_password('x' * 100, hashed))


class TestRegister(unittest.TestCase):
    """Test register function."""

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_register_success(self):
        user = register(self.repo, 'Ann', 'ann@x.com', 'secret123')

        self.assertEqual(user.name, 'Ann')
        self.assertEqual(user.email, 'ann@x.com')
        self.assertEqual(user.provider, Provider.LOCAL)
        self.assertNotEqual(user.password_hash, 'secret123')
        self.assertTrue(verify_password('secret123', user.password_hash))

    def test_register_missing_fields(self):
        for name, email, password in [
            (None, 'ann@x.com', 'secret123'),
            ('Ann', '', 'secret123'),
            ('Ann', 'ann@x.com', None),
        ]:
            with self.subTest(name=name, email=email, password=password):
                with self.assertRaises(ValidationError) as ctx:
                    register(self.repo, name, email, password)
                self.assertEqual(str(ctx.exception), "Name, email and password are required")

    def test_register_twice_same_email_conflicts(self):
        register(self.repo, 'Ann', 'ann@x.com', 'secret123')

        with self.assertRaises(DuplicateError) as ctx:
            register(self.repo, 'Ann Again', 'ann@x.com', 'other456')
        self.assertEqual(str(ctx.exception), "Email already in use")

    def test_register_allows_email_used_by_google_account(self):
        self.repo.create(name='Ann', email='ann@x.com', provider=Provider.GOOGLE)

        user = register(self.repo, 'Ann', 'ann@x.com', 'secret123')

        self.assertEqual(user.provider, Provider.LOCAL)
        self.assertEqual(len(self.repo.store), 2)

    def test_register_propagates_storage_error(self):
        repo = MagicMock()
        repo.get_by_email.return_value = None
        repo.create.side_effect = StorageError("Failed to create user")

        with self.assertRaises(StorageError):
            register(repo, 'Ann', 'ann@x.com', 'secret123')

    def test_register_password_too_long_for_bcrypt(self):
        """bcrypt rejects inputs over 72 bytes on recent releases; older ones truncate."""
        try:
            register(self.repo, 'Ann', 'ann@x.com', 'x' * 100)
        except DomainError as e:
            self.assertEqual(str(e), "Failed to hash password")


class TestAuthenticate(unittest.TestCase):
    """Test authenticate function."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.user = register(self.repo, 'Ann', 'ann@x.com', 'secret123')

    def test_authenticate_success(self):
        user = authenticate(self.repo, 'ann@x.com', 'secret123')
        self.assertEqual(user.id, self.user.id)

    def test_wrong_password_and_unknown_email_are_indistinguishable(self):
        with self.assertRaises(AuthenticationError) as wrong_password:
            authenticate(self.repo, 'ann@x.com', 'wrong')
        with self.assertRaises(AuthenticationError) as unknown_email:
            authenticate(self.repo, 'nobody@x.com', 'secret123')

        self.assertEqual(str(wrong_password.exception), INVALID_CREDENTIALS)
        self.assertEqual(str(wrong_password.exception), str(unknown_email.exception))

    def test_google_account_cannot_login_with_password(self):
        self.repo.create(name='Bob', email='bob@x.com', provider=Provider.GOOGLE)

        with self.assertRaises(AuthenticationError):
            authenticate(self.repo, 'bob@x.com', 'anything')

    def test_authenticate_missing_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            authenticate(self.repo, 'ann@x.com', None)
        self.assertEqual(str(ctx.exception), "Email and password are required")


class TestLoginWithGoogle(unittest.TestCase):
    """Test login_with_google function."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.verifier = FakeIdentityVerifier(client_id='my-client')

    def test_first_login_creates_google_user(self):
        self.verifier.register('tok-1', email='ann@x.com', name='Ann Smith')

        user = login_with_google(self.repo, self.verifier, 'tok-1')

        self.assertEqual(user.provider, Provider.GOOGLE)
        self.assertEqual(user.name, 'Ann Smith')
        self.assertIsNone(user.password_hash)

    def test_second_login_reuses_user(self):
        self.verifier.register('tok-1', email='ann@x.com', name='Ann Smith')

        first = login_with_google(self.repo, self.verifier, 'tok-1')
        second = login_with_google(self.repo, self.verifier, 'tok-1')

        self.assertEqual(first.id, second.id)
        self.assertEqual(len(self.repo.store), 1)

    def test_name_falls_back_to_email_local_part(self):
        self.verifier.register('tok-1', email='ann.smith@x.com')

        user = login_with_google(self.repo, self.verifier, 'tok-1')

        self.assertEqual(user.name, 'ann.smith')

    def test_wrong_audience_is_rejected_without_creating_user(self):
        self.verifier.register('tok-1', email='ann@x.com', aud='someone-else')

        with self.assertRaises(InvalidAssertionError):
            login_with_google(self.repo, self.verifier, 'tok-1')
        self.assertEqual(self.repo.store, {})

    def test_missing_token(self):
        with self.assertRaises(ValidationError) as ctx:
            login_with_google(self.repo, self.verifier, None)
        self.assertEqual(str(ctx.exception), "No Google token provided")

    def test_does_not_reuse_local_account_with_same_email(self):
        local = register(self.repo, 'Ann', 'ann@x.com', 'secret123')
        self.verifier.register('tok-1', email='ann@x.com', name='Ann')

        user = login_with_google(self.repo, self.verifier, 'tok-1')

        self.assertNotEqual(user.id, local.id)
        self.assertEqual(user.provider, Provider.GOOGLE)


if __name__ == '__main__':
    unittest.main()

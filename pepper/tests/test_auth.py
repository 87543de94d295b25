import unittest
import warnings
from datetime import timedelta

import jwt

from pepper.api.auth import create_token, verify_token
from pepper.domain.User import User
from pepper.utilities.config import JWT_ALGORITHM, JWT_SECRET


class TestTokens(unittest.TestCase):

    def test_round_trip(self):
        user = verify_token(create_token(User("u-1", "a@example.com", "Ann")))
        self.assertEqual((user.id, user.email, user.name), ("u-1", "a@example.com", "Ann"))

    def test_expired_token(self):
        token = create_token(User("u-1"), expires_in=timedelta(seconds=-30))
        self.assertIsNone(verify_token(token))

    def test_wrong_secret(self):
        token = jwt.encode({"userId": "u-1"}, JWT_SECRET + "-other", algorithm=JWT_ALGORITHM)
        self.assertIsNone(verify_token(token))

    def test_token_without_user_id(self):
        token = jwt.encode({"email": "a@example.com"}, JWT_SECRET, algorithm=JWT_ALGORITHM)
        self.assertIsNone(verify_token(token))

    def test_default_secret_is_long_enough_for_hs256(self):
        self.assertGreaterEqual(len(JWT_SECRET.encode()), 32)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            verify_token(create_token(User("u-1")))
        self.assertEqual([w for w in caught if "KeyLength" in w.category.__name__], [])

from django.contrib import admin
from django.contrib.auth.hashers import check_password, make_password
from django.test import TestCase, override_settings

from .hashers import AccountBCryptPasswordHasher
from .models import Account


class AccountBCryptPasswordHasherTests(TestCase):

    def test_default_hasher_uses_bcrypt_cost_10(self):
        encoded = make_password('password1')

        self.assertTrue(encoded.startswith('bcrypt$$2b$10$'))
        self.assertTrue(check_password('password1', encoded))
        self.assertFalse(check_password('password2', encoded))

    @override_settings(BCRYPT_ROUNDS=4)
    def test_cost_follows_settings(self):
        self.assertTrue(make_password('password1').startswith('bcrypt$$2b$04$'))

    def test_salted_per_call(self):
        self.assertNotEqual(make_password('password1'), make_password('password1'))

    def test_long_passwords_are_truncated(self):
        hasher = AccountBCryptPasswordHasher()
        encoded = hasher.encode('a' * 72 + 'tail', hasher.salt())

        self.assertTrue(hasher.verify('a' * 72, encoded))
        self.assertTrue(hasher.verify('a' * 100, encoded))
        self.assertFalse(hasher.verify('a' * 71, encoded))


class AccountModelTests(TestCase):

    def make_account(self, email='jo@x.com', name='Jo'):
        account = Account(name=name, email=email, phone_number='+14155552671', terms_accepted=True)
        account.set_password('password1')
        account.save()
        return account

    def test_password_is_hashed(self):
        account = self.make_account()

        self.assertNotEqual(account.password_hash, 'password1')
        self.assertTrue(account.check_password('password1'))
        self.assertFalse(account.check_password('Password1'))

    def test_find_by_email(self):
        account = self.make_account()

        self.assertEqual(Account.objects.find_by_email('jo@x.com'), account)
        self.assertIsNone(Account.objects.find_by_email('JO@x.com'))
        self.assertIsNone(Account.objects.find_by_email('nobody@x.com'))

    def test_find_by_email_returns_earliest(self):
        first = self.make_account(name='First')
        self.make_account(name='Second')

        self.assertEqual(Account.objects.find_by_email('jo@x.com'), first)

    def test_terms_may_be_unset(self):
        account = Account.objects.create(name='Jo', email='jo@x.com', phone_number='123')

        account.refresh_from_db()
        self.assertIsNone(account.terms_accepted)
        self.assertIsNotNone(account.created_at)

    def test_str(self):
        self.assertEqual(str(self.make_account()), 'Jo <jo@x.com>')

    def test_registered_in_admin(self):
        self.assertTrue(admin.site.is_registered(Account))

from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class AccountManager(models.Manager):
    def find_by_email(self, email):
        """First account registered with this email, or None."""
        return self.filter(email=email).order_by('id').first()


class Account(models.Model):
    """Registered storefront customer."""

    name = models.TextField(verbose_name='Name')
    # Indexed for lookups; uniqueness is checked by the signup view, not the table
    email = models.CharField(max_length=254, db_index=True, verbose_name='Email')
    password_hash = models.CharField(max_length=128, verbose_name='Password hash')
    phone_number = models.CharField(max_length=32, verbose_name='Phone number')
    terms_accepted = models.BooleanField(null=True, blank=True, verbose_name='Accepted terms')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Created')

    objects = AccountManager()

    class Meta:
        verbose_name = 'Account'
        verbose_name_plural = 'Accounts'
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.name} <{self.email}>'

    def set_password(self, raw_password):
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password):
        return check_password(raw_password, self.password_hash)

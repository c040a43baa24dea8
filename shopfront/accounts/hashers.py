from django.conf import settings
from django.contrib.auth.hashers import BCryptPasswordHasher
from django.utils.encoding import force_bytes

# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72


class AccountBCryptPasswordHasher(BCryptPasswordHasher):
    """
    Plain bcrypt ("bcrypt$..." encoding) with the cost factor taken from
    settings.BCRYPT_ROUNDS.

    Longer passwords are truncated to 72 bytes before hashing, the same way
    the bcrypt C implementation treats them; newer releases of the Python
    bcrypt package reject them outright instead.
    """

    @property
    def rounds(self):
        return getattr(settings, 'BCRYPT_ROUNDS', 10)

    def encode(self, password, salt):
        # A multi-byte character cut at the limit is dropped whole
        password = force_bytes(password)[:BCRYPT_MAX_PASSWORD_BYTES].decode('utf-8', 'ignore')
        return super().encode(password, salt)

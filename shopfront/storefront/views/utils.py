"""
Session helpers shared by the storefront views.

Each browser session carries two keys:
- ``isLoggedIn``: the login flag, written only as a real boolean
- ``cart``: ordered list of ``{"name", "price", "size"}`` dicts

Views never touch those keys directly. They load a ``ShopSession`` at the
start of the request, change it, and save it back before responding.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional

SESSION_LOGGED_IN_KEY = 'isLoggedIn'
SESSION_CART_KEY = 'cart'

# Longer digit strings cannot address a line of any session cart
MAX_CART_INDEX_DIGITS = 18


@dataclass
class CartItem:
    """One cart line. It has no id: its position in the cart is its identity."""

    name: str = ''
    price: str = ''
    size: str = ''

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data.get('name', ''),
            price=data.get('price', ''),
            size=data.get('size', ''),
        )

    def to_dict(self):
        return asdict(self)


@dataclass
class ShopSession:
    """Typed view of the login flag and cart stored in request.session."""

    is_logged_in: bool = False
    cart: List[CartItem] = field(default_factory=list)

    @classmethod
    def load(cls, request):
        """
        Reads the session of the current request.

        Only a stored ``True`` counts as logged in; a missing key or any other
        value does not.
        """
        session = request.session
        raw_cart = session.get(SESSION_CART_KEY) or []
        return cls(
            is_logged_in=session.get(SESSION_LOGGED_IN_KEY) is True,
            cart=[CartItem.from_dict(item) for item in raw_cart],
        )

    def save(self, request):
        """Writes the record back and marks the session as modified."""
        session = request.session
        session[SESSION_LOGGED_IN_KEY] = self.is_logged_in
        # A session that never had a cart does not get an empty one
        if self.cart or SESSION_CART_KEY in session:
            session[SESSION_CART_KEY] = [item.to_dict() for item in self.cart]
        session.modified = True

    def cart_as_dicts(self):
        return [item.to_dict() for item in self.cart]


def parse_cart_index(raw_index) -> Optional[int]:
    """
    Parses the ``index`` field of the cart removal form.

    Accepts base-10 non-negative integers, surrounding whitespace allowed.
    Returns None for anything else (missing, empty, negative, signed,
    fractional, non-numeric or absurdly long input).
    """
    if raw_index is None:
        return None
    value = str(raw_index).strip()
    if not value.isascii() or not value.isdigit():
        return None
    if len(value) > MAX_CART_INDEX_DIGITS:
        return None
    return int(value)

"""
Storefront views package.

Structure:
- utils.py - session record (login flag + cart) and shared helpers
- auth.py - signup, login, logout
- catalog.py - home, search, product pages
- cart.py - cart page, add and remove lines
"""

from .utils import (
    CartItem,
    ShopSession,
    parse_cart_index,
)

from .auth import (
    LoginForm,
    SignupForm,
    signup_view,
    login_view,
    logout_view,
)

from .catalog import (
    home,
    search,
    product_detail,
)

from .cart import (
    view_cart,
    add_to_cart,
    remove_from_cart,
)

"""
Unit tests for storefront views module.

Test structure:
- test_auth.py: signup, login, logout
- test_cart.py: add to cart, cart page, line removal, end-to-end flow
- test_catalog.py: home, search and product pages
- test_session.py: session record and index parsing helpers
- test_errors.py: last-resort exception logging
"""

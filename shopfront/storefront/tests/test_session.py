"""
Unit tests for session helpers (utils.py).
"""

from importlib import import_module

from django.conf import settings
from django.test import RequestFactory, SimpleTestCase

from storefront.views.utils import CartItem, ShopSession, parse_cart_index


class ShopSessionTests(SimpleTestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.store_class = import_module(settings.SESSION_ENGINE).SessionStore

    def make_request(self, **session_values):
        request = self.factory.get('/')
        # Never saved, so no database access is needed
        request.session = self.store_class()
        for key, value in session_values.items():
            request.session[key] = value
        return request

    def test_load_fresh_session(self):
        state = ShopSession.load(self.make_request())

        self.assertIs(state.is_logged_in, False)
        self.assertEqual(state.cart, [])

    def test_load_only_true_counts_as_logged_in(self):
        for flag, expected in [(True, True), (False, False), (1, False), ('true', False), (None, False)]:
            with self.subTest(flag=flag):
                state = ShopSession.load(self.make_request(isLoggedIn=flag))
                self.assertIs(state.is_logged_in, expected)

    def test_load_cart_items(self):
        request = self.make_request(cart=[
            {'name': 'Shirt', 'price': '20', 'size': 'M'},
            {'name': 'Cap'},
        ])

        state = ShopSession.load(request)

        self.assertEqual(state.cart, [
            CartItem(name='Shirt', price='20', size='M'),
            CartItem(name='Cap', price='', size=''),
        ])

    def test_save_writes_flag_and_cart(self):
        request = self.make_request()
        state = ShopSession.load(request)
        state.is_logged_in = True
        state.cart.append(CartItem(name='Shirt', price='20', size='M'))

        state.save(request)

        self.assertIs(request.session['isLoggedIn'], True)
        self.assertEqual(request.session['cart'], [{'name': 'Shirt', 'price': '20', 'size': 'M'}])
        self.assertTrue(request.session.modified)

    def test_save_does_not_add_empty_cart(self):
        request = self.make_request()

        ShopSession.load(request).save(request)

        self.assertIs(request.session['isLoggedIn'], False)
        self.assertNotIn('cart', request.session)

    def test_save_keeps_emptied_cart(self):
        request = self.make_request(cart=[{'name': 'Shirt', 'price': '20', 'size': 'M'}])
        state = ShopSession.load(request)
        state.cart.pop(0)

        state.save(request)

        self.assertEqual(request.session['cart'], [])

    def test_cart_as_dicts(self):
        state = ShopSession(cart=[CartItem(name='Shirt', price='20', size='M')])
        self.assertEqual(state.cart_as_dicts(), [{'name': 'Shirt', 'price': '20', 'size': 'M'}])


class ParseCartIndexTests(SimpleTestCase):

    def test_valid_indexes(self):
        for raw, expected in [('0', 0), ('2', 2), (' 3 ', 3), ('007', 7), (4, 4), ('1' * 18, 111111111111111111)]:
            with self.subTest(raw=raw):
                self.assertEqual(parse_cart_index(raw), expected)

    def test_invalid_indexes(self):
        for raw in [None, '', '   ', '-1', '+1', '1.5', '1e2', 'abc', '0x10', '²', '٣', '1' * 19, '9' * 5000]:
            with self.subTest(raw=raw[:20] if raw else raw):
                self.assertIsNone(parse_cart_index(raw))

"""
Unit tests for catalog views (catalog.py).
"""

from django.test import TestCase, Client
from django.urls import reverse


class CatalogPageTests(TestCase):
    """Home, search and product pages render for anyone."""

    def setUp(self):
        self.client = Client()
        self.pages = {
            'home': 'pages/index.html',
            'search': 'pages/search.html',
            'product': 'pages/product.html',
        }

    def test_pages_for_anonymous_session(self):
        for url_name, template in self.pages.items():
            with self.subTest(page=url_name):
                response = self.client.get(reverse(url_name))

                self.assertEqual(response.status_code, 200)
                self.assertTemplateUsed(response, template)
                self.assertIs(response.context['isLoggedIn'], False)
                self.assertContains(response, 'Log in')

    def test_pages_for_logged_in_session(self):
        session = self.client.session
        session['isLoggedIn'] = True
        session.save()

        for url_name in self.pages:
            with self.subTest(page=url_name):
                response = self.client.get(reverse(url_name))

                self.assertEqual(response.status_code, 200)
                self.assertIs(response.context['isLoggedIn'], True)
                self.assertContains(response, 'Log out')

    def test_flag_must_be_true(self):
        """A stored non-boolean flag renders as logged out."""
        session = self.client.session
        session['isLoggedIn'] = 'true'
        session.save()

        response = self.client.get(reverse('home'))

        self.assertIs(response.context['isLoggedIn'], False)

    def test_product_page_has_add_to_cart_form(self):
        response = self.client.get(reverse('product'))

        self.assertContains(response, 'name="size"')
        self.assertContains(response, 'csrfmiddlewaretoken')

    def test_unsupported_methods(self):
        for url_name in self.pages:
            with self.subTest(page=url_name):
                response = self.client.put(reverse(url_name))
                self.assertEqual(response.status_code, 405)

        self.assertEqual(self.client.post(reverse('home')).status_code, 405)
        self.assertEqual(self.client.post(reverse('search')).status_code, 405)

    def test_page_views_do_not_create_cart(self):
        self.client.get(reverse('home'))
        self.client.get(reverse('product'))

        self.assertNotIn('cart', self.client.session)

"""
Catalog views: home page, search and product page.

Render-only. Each page gets the login flag so the layout can switch
between login and account links.
"""

from django.shortcuts import render
from django.views.decorators.http import require_GET, require_http_methods

from .cart import add_to_cart
from .utils import ShopSession


def _render_with_login_flag(request, template_name):
    state = ShopSession.load(request)
    return render(request, template_name, {'isLoggedIn': state.is_logged_in})


@require_GET
def home(request):
    return _render_with_login_flag(request, 'pages/index.html')


@require_GET
def search(request):
    return _render_with_login_flag(request, 'pages/search.html')


@require_http_methods(['GET', 'POST'])
def product_detail(request):
    """
    GET renders the product page. POST comes from the add-to-cart form on
    that page and goes to the cart module.
    """
    if request.method == 'POST':
        return add_to_cart(request)
    return _render_with_login_flag(request, 'pages/product.html')

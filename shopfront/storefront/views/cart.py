"""
Cart views - the session shopping cart.

Contains views for:
- viewing the cart
- adding a product line
- removing a line by its position

Adding and viewing require the session login flag to be exactly True.
Read-modify-write of the session is not serialised, so two requests racing
on the same session can lose an update.
"""

import logging

from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_http_methods, require_POST

from .utils import CartItem, ShopSession, parse_cart_index

cart_logger = logging.getLogger('storefront.cart')


# ==================== CART VIEWS ====================

@never_cache
@require_http_methods(['GET', 'POST'])
def view_cart(request):
    """
    Cart page.

    GET renders the cart for a logged-in session and sends everyone else to
    the login page. POST is the remove-line form of the page.

    Context:
        cartItems: list of {"name", "price", "size"} dicts, in cart order
    """
    if request.method == 'POST':
        return remove_from_cart(request)

    state = ShopSession.load(request)
    if not state.is_logged_in:
        return redirect('login')

    return render(request, 'pages/cart.html', {'cartItems': state.cart_as_dicts()})


@require_POST
def add_to_cart(request):
    """
    Appends a {name, price, size} line to the cart.

    A session that is not logged in gets a redirect to the login page and
    the item is dropped, not kept for later.
    """
    state = ShopSession.load(request)
    if not state.is_logged_in:
        return redirect('login')

    item = CartItem(
        name=request.POST.get('name', ''),
        price=request.POST.get('price', ''),
        size=request.POST.get('size', ''),
    )
    state.cart.append(item)
    state.save(request)

    cart_logger.info('Added %r (size %r) to cart, %d item(s) now', item.name, item.size, len(state.cart))
    return redirect('cart')


@require_POST
def remove_from_cart(request):
    """
    Removes the line at position ``index`` and shifts the rest up.

    Answers a bare 400 (cart untouched) when the index is not a
    non-negative integer or is not below the cart length.
    """
    state = ShopSession.load(request)
    index = parse_cart_index(request.POST.get('index'))

    if index is None or index >= len(state.cart):
        cart_logger.info('Rejected cart removal, index=%r, cart size %d', request.POST.get('index'), len(state.cart))
        return HttpResponse(status=400)

    removed = state.cart.pop(index)
    state.save(request)

    cart_logger.info('Removed %r from cart position %d', removed.name, index)
    return redirect('cart')

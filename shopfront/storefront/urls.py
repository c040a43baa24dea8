from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    # auth
    path('signup', views.signup_view, name='signup'),
    path('login', views.login_view, name='login'),
    path('logout', views.logout_view, name='logout'),
    # catalog
    path('search', views.search, name='search'),
    path('product', views.product_detail, name='product'),
    # cart
    path('cart', views.view_cart, name='cart'),
]

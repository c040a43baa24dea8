"""
Authentication views for the storefront.

Contains signup, login and logout, plus the forms that validate them.

Two separate failure channels:
- invalid input answers 400 with a JSON list of field errors;
- business-rule failures (email taken, unknown user, wrong password)
  redirect back to the form with a human-readable query-string message.
"""

import logging
from urllib.parse import quote, urlencode

from django import forms
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods

from accounts.models import Account
from ..validators import validate_mobile_phone
from .utils import ShopSession

logger = logging.getLogger('storefront.auth')

NAME_REQUIRED = 'Name is required'
INVALID_EMAIL = 'Invalid email address'
PASSWORD_TOO_SHORT = 'Password must be at least 8 characters'
INVALID_PHONE = 'Invalid phone number'
TERMS_NOT_ACCEPTED = 'Terms and conditions must be accepted'

USER_EXISTS = 'User already exists'
USER_NOT_FOUND = 'User not found'
INCORRECT_PASSWORD = 'Incorrect password'

PASSWORD_MIN_LENGTH = 8

# Submitted values of these fields are never echoed back in error payloads
SECRET_FIELDS = frozenset({'password'})

TERMS_TRUE_VALUES = frozenset({'true', '1', 'yes', 'on'})
TERMS_FALSE_VALUES = frozenset({'false', '0', 'no'})


# ==================== FORMS ====================

class LoginForm(forms.Form):
    """Login form: email and password."""

    email = forms.EmailField(
        max_length=254,
        error_messages={
            'required': INVALID_EMAIL,
            'invalid': INVALID_EMAIL,
            'max_length': INVALID_EMAIL,
        },
    )
    password = forms.CharField(
        strip=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages={
            'required': PASSWORD_TOO_SHORT,
            'min_length': PASSWORD_TOO_SHORT,
        },
    )

    def clean_email(self):
        # EmailField always strips; padded addresses are refused, not trimmed
        raw_email = self.data.get('email', '')
        if raw_email != raw_email.strip():
            raise forms.ValidationError(INVALID_EMAIL, code='invalid')
        return self.cleaned_data['email']


class SignupForm(LoginForm):
    """Registration form."""

    name = forms.CharField(
        strip=False,
        error_messages={'required': NAME_REQUIRED},
    )
    number = forms.CharField(
        strip=False,
        validators=[validate_mobile_phone],
        error_messages={'required': INVALID_PHONE},
    )
    # Bound to the misspelled key "termsAndConditons", which the signup page
    # never sends, so this rule always passes and the submitted
    # termsAndConditions checkbox goes unvalidated.
    termsAndConditons = forms.BooleanField(
        required=False,
        error_messages={'invalid': TERMS_NOT_ACCEPTED},
    )

    field_order = ['name', 'email', 'password', 'number', 'termsAndConditons']


def validation_errors_response(form):
    """
    400 response listing every field error of a bound, invalid form.

    Body: {"errors": [{"type", "value", "msg", "path", "location"}, ...]}.
    "value" is left out when the field was not submitted or is a secret.
    """
    errors = []
    for field_name, messages in form.errors.items():
        submitted = form.data.get(field_name)
        for message in messages:
            error = {'type': 'field'}
            if submitted is not None and field_name not in SECRET_FIELDS:
                error['value'] = submitted
            error.update({'msg': message, 'path': field_name, 'location': 'body'})
            errors.append(error)
    return JsonResponse({'errors': errors}, status=400)


def coerce_terms_flag(raw_value):
    """
    Reads the submitted termsAndConditions value as stored on the account.

    Missing means "not recorded" (None). Unknown values raise ValueError,
    which the signup view reports as a registration failure.
    """
    if raw_value is None:
        return None
    value = str(raw_value).strip().lower()
    if value in TERMS_TRUE_VALUES:
        return True
    if value in TERMS_FALSE_VALUES:
        return False
    raise ValueError(f'Unreadable termsAndConditions value: {raw_value!r}')


def _redirect_with_query(url_name, **params):
    query = urlencode(params, quote_via=quote)
    return redirect(f"{reverse(url_name)}?{query}")


# ==================== VIEWS ====================

@require_http_methods(['GET', 'POST'])
def signup_view(request):
    """
    GET: the signup page.

    POST: validate, refuse a taken email, then hash the password and store
    the account. Storage or hashing failures are logged and answered with a
    generic 500; nothing is retried.
    """
    if request.method == 'GET':
        return render(request, 'pages/signup.html', {
            'message': request.GET.get('message'),
        })

    form = SignupForm(request.POST)
    if not form.is_valid():
        return validation_errors_response(form)

    email = form.cleaned_data['email']

    if Account.objects.find_by_email(email) is not None:
        logger.info('Signup refused, email already registered: %s', email)
        return _redirect_with_query('signup', message=USER_EXISTS)

    try:
        account = Account(
            name=form.cleaned_data['name'],
            email=email,
            phone_number=form.cleaned_data['number'],
            terms_accepted=coerce_terms_flag(request.POST.get('termsAndConditions')),
        )
        account.set_password(form.cleaned_data['password'])
        account.save()
    except Exception as e:
        logger.error(f"Error registering user {email}: {e}", exc_info=True)
        return HttpResponse('Error registering user', status=500, content_type='text/plain; charset=utf-8')

    logger.info('New account registered: %s (id=%s)', email, account.pk)
    return redirect('home')


@require_http_methods(['GET', 'POST'])
def login_view(request):
    """
    GET: the login page.

    POST: validate, look the account up by email and compare the password
    against the stored hash. Success sets the session login flag.
    """
    if request.method == 'GET':
        return render(request, 'pages/login.html', {
            'error': request.GET.get('error'),
        })

    form = LoginForm(request.POST)
    if not form.is_valid():
        return validation_errors_response(form)

    email = form.cleaned_data['email']
    account = Account.objects.find_by_email(email)

    if account is None:
        logger.info('Login failed, no account for %s', email)
        return _redirect_with_query('login', error=USER_NOT_FOUND)

    if not account.check_password(form.cleaned_data['password']):
        logger.info('Login failed, wrong password for %s', email)
        return _redirect_with_query('login', error=INCORRECT_PASSWORD)

    state = ShopSession.load(request)
    state.is_logged_in = True
    state.save(request)

    logger.info('Account %s logged in', account.pk)
    return redirect('home')


@require_GET
def logout_view(request):
    """
    Clears the login flag and goes home.

    The session itself (id and cart) is kept; logging out twice is harmless.
    """
    state = ShopSession.load(request)
    state.is_logged_in = False
    state.save(request)
    return redirect('home')

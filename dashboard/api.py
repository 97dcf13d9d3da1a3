import logging
import os

import requests
from dotenv import load_dotenv

from .exceptions import SubmissionFailure, error_for_status

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:8000/api'
DEFAULT_TIMEOUT = 10


def get_api_url():
    load_dotenv()
    return os.environ.get('MEALPREP_API_URL', DEFAULT_API_URL)


class ApiClient:
    """
    Thin wrapper around a ``requests.Session`` speaking the backend's
    ``{success, data, count, message, error}`` envelope.

    Every call is a single attempt. Non-2xx responses and transport errors
    are raised as ``SubmissionFailure`` (or ``Conflict``/``Invalid``/
    ``NotFound`` for 409/400/404) carrying the server's error message.
    """

    def __init__(self, base_url=None, token=None, timeout=DEFAULT_TIMEOUT, session=None):
        self.base_url = (base_url or get_api_url()).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        if token:
            self.set_token(token)

    def set_token(self, token):
        self.session.headers['Authorization'] = f'Bearer {token}'

    def login(self, email, password):
        """Exchange credentials for a JWT and keep it for later calls"""
        data = self.post('users/login', {'email': email, 'password': password})
        self.set_token(data['token'])
        logger.info(f"Signed in as {email}")
        return data['user']

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, params=None, payload=None):
        """Issue one request and return the decoded envelope"""
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self.session.request(
                method, self.url(path), params=params, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise SubmissionFailure(str(exc)) from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok or body.get('success') is False:
            message = body.get('error') or body.get('message') or response.reason \
                or f'HTTP {response.status_code}'
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise error_for_status(response.status_code)(
                message, status_code=response.status_code, details=body.get('details'))

        return body

    def get(self, path, params=None):
        return self.request('GET', path, params=params).get('data')

    def post(self, path, payload=None):
        return self.request('POST', path, payload=payload).get('data')

    def put(self, path, payload=None):
        return self.request('PUT', path, payload=payload).get('data')

    def patch(self, path, payload=None):
        return self.request('PATCH', path, payload=payload).get('data')

    def delete(self, path):
        return self.request('DELETE', path).get('data')

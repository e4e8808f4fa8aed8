import logging
import os
import platform

import requests

from telerivet import signals
from telerivet.cursor import Cursor
from telerivet.exceptions import APIError, InvalidParameter, NotFound, MalformedResponse
from telerivet.organization import Organization
from telerivet.project import Project
from telerivet.utils import encode_body, encode_query

__all__ = (
    'API',
    'Cursor',
    'cursor',
    'entity',
    'exceptions',
    'fields',
    'signals',
)

__version__ = '1.8.0'

DEFAULT_API_URL = 'https://api.telerivet.com/v1'

log = logging.getLogger(__name__)


def _api_error(error):
    code = error.get('code')
    message = error.get('message')

    if code == 'invalid_param':
        return InvalidParameter(message, code, error.get('param'))
    if code == 'not_found':
        return NotFound(message, code)
    return APIError(message, code)


class API(object):
    """
    A client handle to the Telerivet REST API.

    Each API key is associated with a Telerivet user account, and all API actions are performed with that
    user's permissions.

    Configuration keys and their defaults:

    =========================  ==========  =========================================================================
    Key                        Default     Description
    =========================  ==========  =========================================================================
    compression_threshold      ``400``     Size in bytes at which ``POST`` and ``PUT`` bodies are gzip-compressed;
                                           ``None`` disables compression
    max_page_size              ``200``     Largest ``page_size`` the API accepts when listing
    timeout                    ``None``    Timeout in seconds passed to :mod:`requests` for every request
    =========================  ==========  =========================================================================

    Usage example:

    .. code-block:: python

        with API('YOUR_API_KEY') as api:
            project = api.init_project_by_id('PJ...')
            project.send_message(to_number='+16505550123', content='Hello world!')

    :param str api_key: the API key; sent as the username of HTTP basic authentication
    :param str api_url: base URL of the API
    :param requests.Session session: an optional session to send requests with
    """

    default_config = {
        'compression_threshold': 400,
        'max_page_size': 200,
        'timeout': None,
    }

    total_requests = 0

    def __init__(self, api_key, api_url=DEFAULT_API_URL, session=None, **config):
        unknown = set(config) - set(self.default_config)
        if unknown:
            raise TypeError('Unknown configuration keys: {}'.format(', '.join(sorted(unknown))))

        self.api_key = api_key
        self.api_url = api_url.rstrip('/')
        self.config = dict(self.default_config, **config)
        self.num_requests = 0

        self._owns_session = session is None
        self._session = None
        if session is not None:
            self._session = self._init_session(session)

    @classmethod
    def from_env(cls, **config):
        """
        Create a client from the ``TELERIVET_API_KEY`` and ``TELERIVET_API_URL`` environment variables.
        """
        try:
            api_key = os.environ['TELERIVET_API_KEY']
        except KeyError:
            raise RuntimeError('TELERIVET_API_KEY is not set')
        return cls(api_key, os.environ.get('TELERIVET_API_URL', DEFAULT_API_URL), **config)

    def _init_session(self, session):
        session.auth = (self.api_key, '')
        session.headers['User-Agent'] = 'Telerivet Python Client/{} Python/{}'.format(
            __version__, platform.python_version())
        return session

    @property
    def session(self):
        if self._session is None:
            self._session = self._init_session(requests.Session())
        return self._session

    def close(self):
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def request(self, method, path, params=None):
        """
        Make a request to the API and return the decoded response.

        ``GET`` and ``DELETE`` parameters are encoded in the query string, ``POST`` and ``PUT`` parameters are
        sent as a JSON body.

        :param str method: one of ``GET``, ``POST``, ``PUT`` or ``DELETE``
        :param str path: path relative to the API URL, e.g. ``/projects/PJ123``
        :param dict params: optional parameters
        :raises MalformedResponse: if the response is not JSON
        :raises APIError: if the API returned an error
        """
        url = self.api_url + path
        headers = {}
        data = None

        if method in ('POST', 'PUT'):
            data, headers = encode_body(params, self.config['compression_threshold'])
            if 'Content-Encoding' in headers:
                log.debug('Compressed %s %s body to %s bytes', method, path, len(data))
        elif method in ('GET', 'DELETE'):
            query = encode_query(params)
            if query:
                url = '{}?{}'.format(url, query)
        else:
            raise ValueError('Invalid HTTP method: {}'.format(method))

        response = self.session.request(method, url, data=data, headers=headers, timeout=self.config['timeout'])

        self.num_requests += 1
        API.total_requests += 1

        log.debug('%s %s -> %s', method, path, response.status_code)
        signals.request_finished.send(self, method=method, path=path, status_code=response.status_code)

        try:
            result = response.json()
        except ValueError:
            raise MalformedResponse(response.status_code, response.text)

        if isinstance(result, dict) and isinstance(result.get('error'), dict):
            error = _api_error(result['error'])
            log.info('%s %s failed: %s (%s)', method, path, error.message, error.code)
            raise error

        return result

    def cursor(self, factory, path, params=None):
        return Cursor(self, path, factory, params)

    def get_project_by_id(self, id):
        """
        Retrieve the project with the given ID.
        """
        return Project(self, self.request('GET', '/projects/{}'.format(id)))

    def init_project_by_id(self, id):
        """
        Initialize the project with the given ID without making an API request.
        """
        return Project(self, {'id': id}, is_loaded=False)

    def query_projects(self, **options):
        """
        Query projects accessible to the current user account.
        """
        return self.cursor(Project, '/projects', options)

    def get_organization_by_id(self, id):
        return Organization(self, self.request('GET', '/organizations/{}'.format(id)))

    def init_organization_by_id(self, id):
        return Organization(self, {'id': id}, is_loaded=False)

    def query_organizations(self, **options):
        return self.cursor(Organization, '/organizations', options)

import logging

log = logging.getLogger(__name__)


class Cursor(object):
    """
    An iterator over the results of a list endpoint.

    Pages are fetched on demand, with the ``marker`` returned by the previous page, until the API
    reports the results are no longer ``truncated``. No request is made until the first item is requested.

    .. code-block:: python

        for contact in project.query_contacts(name={'prefix': 'John'}).limit(50):
            print(contact.name)

    :param API api: the client used for page requests
    :param str path: path of the list endpoint
    :param callable factory: called as ``factory(api, data)`` to build an item from each raw result
    :param dict params: filter and sort parameters; ``count`` is not allowed, use :meth:`count` instead
    """

    def __init__(self, api, path, factory, params=None):
        params = dict(params or {})

        if 'count' in params:
            raise ValueError("Cannot construct a Cursor with a 'count' parameter. Call count() instead.")

        self.api = api
        self.path = path
        self.factory = factory
        self.params = params

        self._limit = None
        self._count = None
        self._data = None
        self._pos = 0
        self._offset = 0
        self._truncated = False
        self._next_marker = None
        self.num_pages = 0

    def limit(self, limit):
        """
        Limit the total number of items returned by the cursor, across all pages.
        """
        self._limit = limit
        return self

    def count(self):
        """
        Return the total number of items matching the cursor's parameters.
        """
        if self._count is None:
            params = dict(self.params)
            params['count'] = 1
            response = self.api.request('GET', self.path, params)
            self._count = int(response['count'])
        return self._count

    def _load_next_page(self):
        params = dict(self.params)

        if self._next_marker is not None:
            params['marker'] = self._next_marker

        if self._limit is not None and 'page_size' not in params:
            params['page_size'] = min(self._limit, self.api.config['max_page_size'])

        response = self.api.request('GET', self.path, params)

        self._data = response['data']
        self._truncated = bool(response.get('truncated'))
        self._next_marker = response.get('next_marker')
        self._pos = 0
        self.num_pages += 1

        log.debug('Fetched page %s of %s (%s items, truncated=%s)',
                  self.num_pages, self.path, len(self._data), self._truncated)

    def __iter__(self):
        return self

    def __next__(self):
        if self._limit is not None and self._offset >= self._limit:
            raise StopIteration

        if self._data is None:
            self._load_next_page()

        while self._pos >= len(self._data) and self._truncated:
            self._load_next_page()

        if self._pos >= len(self._data):
            raise StopIteration

        item = self._data[self._pos]
        self._pos += 1
        self._offset += 1
        return self.factory(self.api, item)

    def all(self):
        """
        Return all remaining items as a list.
        """
        return list(self)

    def __repr__(self):
        return '<Cursor {} {}>'.format(self.path, self.params)

import gzip
import json
import unittest
from urllib.parse import urlsplit

import requests
from flask import Flask, request
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from telerivet import API
from telerivet.utils import AttributeDict


class FlaskAdapter(BaseAdapter):
    """
    A :mod:`requests` transport adapter that sends requests to a Flask application instead of the network.
    """

    def __init__(self, app):
        super(FlaskAdapter, self).__init__()
        self.client = app.test_client()

    def send(self, prepared, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        url = urlsplit(prepared.url)
        body = prepared.body
        if isinstance(body, str):
            body = body.encode('utf-8')

        headers = {k: v for k, v in prepared.headers.items() if k.lower() != 'content-length'}

        result = self.client.open(url.path,
                                  method=prepared.method,
                                  query_string=url.query,
                                  headers=headers,
                                  data=body or b'')

        response = requests.Response()
        response.status_code = result.status_code
        response.reason = result.status
        response.headers = CaseInsensitiveDict(result.headers)
        response._content = result.get_data()
        response.url = prepared.url
        response.request = prepared
        response.encoding = 'utf-8'
        return response

    def close(self):
        pass


class BaseTestCase(unittest.TestCase):
    api_url = 'http://api.telerivet.test/v1'
    api_key = 'test-key'

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.app = self.create_app()
        self.requests = []
        self.app.before_request(self._record_request)

        session = requests.Session()
        session.mount(self.api_url, FlaskAdapter(self.app))
        self.api = API(self.api_key, self.api_url, session=session)

    def create_app(self):
        app = Flask(__name__)
        app.testing = True
        return app

    def route(self, rule, methods=('GET',)):
        """
        Register a view on the fake API, relative to the API URL.
        """
        return self.app.route(urlsplit(self.api_url).path + rule, methods=list(methods))

    def _record_request(self):
        data = request.get_data()
        body = data
        if request.headers.get('Content-Encoding') == 'gzip':
            body = gzip.decompress(data)

        self.requests.append(AttributeDict(
            method=request.method,
            path=request.path[len(urlsplit(self.api_url).path):],
            args=list(request.args.items(multi=True)),
            headers=request.headers,
            data=data,
            body=body,
            json=json.loads(body.decode('utf-8')) if body else None
        ))

    @property
    def last_request(self):
        return self.requests[-1]

    def assertJSONEqual(self, first, second, msg=None):
        self.assertEqual(json.loads(json.dumps(first)), json.loads(json.dumps(second)), msg)

import json

import pytest


@pytest.fixture
def base_event():
    return {'requestContext': {'baseUrl': 'https://sho.rt'}}


@pytest.fixture
def body():
    """Decode the JSON body of a handler response."""

    def _body(response):
        return json.loads(response['body'])

    return _body

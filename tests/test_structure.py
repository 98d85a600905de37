import logging

import pytest

from routeparams import field
from routeparams.structure import Structure, build_parameters


class Filter(Structure):
    FIELDS = ('status', 'path')

    def __init__(self, status, path=None):
        self.status = status
        self.path = path


class Query(Structure):
    FIELDS = ('term', 'filter', 'page', 'callback')

    def __init__(self, term, filter=None, page=1, callback=None):
        self.term = term
        self.filter = filter
        self.page = page
        self.callback = callback


class Computed:
    """ Structure without the base class, describing its fields directly """

    def describe_fields(self):
        return [field.PrimitiveField('answer', 42), field.OpaqueField('secret', object())]


def test_describe_fields():
    query = Query('abc', page=2)
    assert [f.name for f in query.describe_fields()] == ['term', 'filter', 'page', 'callback']
    first = query.describe_fields()[0]
    assert type(first) is field.PrimitiveField
    assert first.value == 'abc'


@pytest.mark.parametrize('structure, ignore, expected', (
    (Query('abc'), (), {'term': 'abc', 'page': 1}),
    (Query('abc'), ('page', ), {'term': 'abc'}),
    (Query('abc', filter=Filter('open')), (), {'term': 'abc', 'filter': {'status': 'open'}, 'page': 1}),
    (Query('abc', page=[1, 2]), ('term', ), {'page': [1, 2]}),
    (Computed(), (), {'answer': 42}),
))
def test_build_parameters(structure, ignore, expected):
    assert build_parameters(structure, ignore=ignore) == expected


def test_build_parameters_empty():
    assert build_parameters(Query('abc'), ignore=('term', 'page')) == {}
    assert build_parameters(Structure()) == {}


def test_build_parameters_nested_not_ignored():
    # Ignored names only apply to the top level
    query = Query('abc', filter=Filter('open', path='/nested'))
    parameters = build_parameters(query, ignore=('path', 'page'))
    assert parameters == {'term': 'abc', 'filter': {'status': 'open', 'path': '/nested'}}


def test_build_parameters_order():
    query = Query('abc', filter=Filter('open'))
    assert list(build_parameters(query)) == ['term', 'filter', 'page']


def test_build_parameters_drops_opaque(caplog):
    with caplog.at_level(logging.DEBUG, logger='routeparams.structure'):
        parameters = build_parameters(Query('abc', callback=len))
    assert 'callback' not in parameters
    assert 'callback' in caplog.text


def test_repr():
    assert repr(Filter('open')) == "Filter(status='open', path=None)"

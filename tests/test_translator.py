import logging

import pytest

from archive.controllers.base import QueryRetrieveLevel
from archive.controllers.dictionary import AttributeDictionary
from archive.controllers.query import (
    PatternCondition,
    PersonNameCondition,
    QueryTranslator,
    RangeCondition,
)
from archive.exceptions import UnknownTag


@pytest.fixture
def translator():
    return QueryTranslator(AttributeDictionary())


def test_person_name_wildcards(translator):
    query = translator.translate(QueryRetrieveLevel.STUDY, {'PatientName': 'DOE*'})

    assert list(query.store_filter) == [PersonNameCondition(tag='00100010', pattern='DOE.*')]
    assert query.projection == ['00100010']


def test_every_person_name_wildcard_is_expanded(translator):
    query = translator.translate(QueryRetrieveLevel.STUDY, {'PatientName': '*DOE*J*'})

    condition, = query.store_filter
    assert condition.pattern == '.*DOE.*J.*'
    assert condition.component == 'Alphabetic'


def test_date_range(translator):
    query = translator.translate(
        QueryRetrieveLevel.STUDY,
        {'StudyDate': '20200101-20201231'},
        ['0020000D']
    )

    assert list(query.store_filter) == [
        RangeCondition(tag='00080020', lower='20200101', upper='20201231')
    ]
    assert query.projection == ['0020000D', '00080020']


def test_open_ended_ranges_keep_empty_bounds(translator):
    single = translator.translate(QueryRetrieveLevel.STUDY, {'StudyDate': '20200101'})
    lower_only = translator.translate(QueryRetrieveLevel.STUDY, {'StudyTime': '120000-'})

    assert list(single.store_filter) == [RangeCondition(tag='00080020', lower='20200101', upper='')]
    assert list(lower_only.store_filter) == [RangeCondition(tag='00080030', lower='120000', upper='')]


def test_modalities_in_study_matches_modality(translator):
    query = translator.translate(QueryRetrieveLevel.STUDY, {'ModalitiesInStudy': 'CT'})

    assert list(query.store_filter) == [PatternCondition(tag='00080060', pattern='CT')]
    assert query.projection == ['00080061']


def test_other_vrs_use_pattern(translator):
    query = translator.translate(QueryRetrieveLevel.STUDY, {'AccessionNumber': 'ACC1'})

    assert list(query.store_filter) == [PatternCondition(tag='00080050', pattern='ACC1')]


def test_unknown_keys_are_ignored(translator, caplog):
    with caplog.at_level(logging.DEBUG, logger='archive.query'):
        query = translator.translate(
            QueryRetrieveLevel.STUDY,
            {'limit': '25', 'includefield': 'all'},
            ['0020000D']
        )

    assert not query.store_filter
    assert query.projection == ['0020000D']
    assert 'Ignoring unknown query attribute: limit' in caplog.text


def test_empty_value_only_projects(translator):
    query = translator.translate(QueryRetrieveLevel.STUDY, {'PatientID': '', 'Modality': None})

    assert len(query.store_filter) == 0
    assert query.projection == ['00100020', '00080060']


def test_tags_accepted_as_keys(translator):
    query = translator.translate(QueryRetrieveLevel.IMAGE, {'00100020': 'PAT1'})

    assert list(query.store_filter) == [PatternCondition(tag='00100020', pattern='PAT1')]


def test_required_attributes_are_not_mutated(translator):
    required = ['0020000D', '00100010']

    query = translator.translate(QueryRetrieveLevel.STUDY, {'PatientName': 'DOE', 'PatientID': 'X'}, required)

    assert required == ['0020000D', '00100010']
    assert query.projection == ['0020000D', '00100010', '00100020']


def test_conditions_combine(translator):
    query = translator.translate(
        QueryRetrieveLevel.SERIES,
        {'StudyInstanceUID': '1.2.3', 'Modality': 'MR'}
    )

    assert len(query.store_filter) == 2
    assert query.level is QueryRetrieveLevel.SERIES


def test_unknown_tag_propagates(translator):
    with pytest.raises(UnknownTag):
        translator.translate(QueryRetrieveLevel.STUDY, {'00091001': 'x'})

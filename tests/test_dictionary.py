import pytest

from archive.controllers.dictionary import AttributeDictionary, is_tag
from archive.exceptions import UnknownTag, UnresolvedAttribute


@pytest.fixture
def dictionary():
    return AttributeDictionary()


class TestResolve:
    def test_keyword_resolves_to_tag(self, dictionary):
        assert dictionary.resolve('PatientName') == '00100010'
        assert dictionary.resolve('StudyInstanceUID') == '0020000D'

    def test_tag_is_returned_unchanged(self, dictionary):
        assert dictionary.resolve('00100010') == '00100010'
        # Not in the dictionary, but already a tag
        assert dictionary.resolve('00091001') == '00091001'

    def test_tag_skips_keyword_lookup(self, dictionary, monkeypatch):
        def no_lookup(name):
            raise AssertionError(f"keyword lookup for {name}")

        monkeypatch.setattr('archive.controllers.dictionary.tag_for_keyword', no_lookup)

        assert dictionary.resolve('00100010') == '00100010'
        assert dictionary.require('00091001') == '00091001'

    def test_keyword_match_is_case_sensitive(self, dictionary):
        assert dictionary.resolve('patientname') is None

    def test_lowercase_hex_is_not_a_tag(self, dictionary):
        assert not is_tag('0020000d')
        assert dictionary.resolve('0020000d') is None

    def test_unknown_name(self, dictionary):
        assert dictionary.resolve('NotAKeyword') is None
        assert dictionary.resolve('limit') is None

    def test_require_raises_for_unknown_name(self, dictionary):
        with pytest.raises(UnresolvedAttribute) as excinfo:
            dictionary.require('NotAKeyword')
        assert excinfo.value.name == 'NotAKeyword'


class TestValueRepresentation:
    @pytest.mark.parametrize('tag, vr', [
        ('00100010', 'PN'),
        ('00080020', 'DA'),
        ('00080030', 'TM'),
        ('0008002A', 'DT'),
        ('00080060', 'CS'),
        ('0020000D', 'UI'),
    ])
    def test_standard_tags(self, dictionary, tag, vr):
        assert dictionary.value_representation(tag) == vr

    def test_ambiguous_vr_takes_first(self, dictionary):
        # Pixel Data is 'OB or OW'
        assert dictionary.value_representation('7FE00010') == 'OB'

    def test_unknown_tag_raises(self, dictionary):
        with pytest.raises(UnknownTag):
            dictionary.value_representation('00091001')

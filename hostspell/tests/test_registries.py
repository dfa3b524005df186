from ..core.model import HostModel
from ..io.registries import HostRegistry

import pytest


@pytest.fixture
def registry():
    model = HostModel("abcdefghijklmnopqrstuvwxyz.")
    model.train("https://docs.rs/x https://docs.rs/y https://norvig.com/z "
                "https://abd.com/ https://abc.com/")

    return HostRegistry.from_model(model)


def test_from_model(registry):
    assert list(registry['host']) == ['docs.rs', 'abc.com', 'abd.com',
                                      'norvig.com']
    assert list(registry['count']) == [2, 1, 1, 1]
    assert registry.alphabet == "abcdefghijklmnopqrstuvwxyz."


def test_to_model(registry):
    model = registry.to_model()

    assert dict(model.counts) == {'docs.rs': 2, 'norvig.com': 1,
                                  'abd.com': 1, 'abc.com': 1}
    assert model.alphabet == registry.alphabet


def test_with_name(registry):
    assert registry.with_name('docs.rs')['count'] == 2
    assert registry.with_name('doks.rs')['host'] == 'docs.rs'

    with pytest.raises(LookupError):
        registry.with_name('xyz123')


def test_correct(registry):
    assert registry.correct('norvig.cm') == 'norvig.com'
    assert registry.correct('xyz123') == 'xyz123'


def test_ecsv_round_trip(registry, tmp_path):
    path = str(tmp_path / 'hosts.ecsv')
    registry.write(path, format='ascii.ecsv')

    loaded = HostRegistry.read(path, format='ascii.ecsv')

    assert loaded.as_dict() == registry.as_dict()
    assert loaded.alphabet == registry.alphabet
    assert loaded.to_model().correct('doks.rs') == 'docs.rs'


def test_load(registry, tmp_path):
    path = str(tmp_path / 'hosts.ecsv')
    registry.write(path, format='ascii.ecsv')

    other = HostRegistry.from_model(HostModel())
    other.load(path)

    assert other.as_dict() == registry.as_dict()
    assert other.alphabet == registry.alphabet


def test_empty_model():
    registry = HostRegistry.from_model(HostModel())

    assert len(registry) == 0
    assert registry.to_model().correct('docs.rs') is None


def test_mixed_case_queries(registry):
    model = registry.to_model()

    assert registry.correct('Docs.RS') == model.correct('Docs.RS') == 'docs.rs'
    assert registry.correct('DOKS.RS') == 'docs.rs'
    assert registry.with_name('DOCS.RS')['count'] == 2

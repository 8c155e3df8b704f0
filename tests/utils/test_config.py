import pytest

from seqfind.utils import EmptyTokenPolicy, SearchConfig


def test_defaults():
    config = SearchConfig()
    assert config.empty_token is EmptyTokenPolicy.RAISE
    assert config.output is list
    assert config.use_numpy is True


def test_policy_coerced_from_string():
    assert SearchConfig(empty_token="EMPTY").empty_token is EmptyTokenPolicy.EMPTY
    assert EmptyTokenPolicy.coerce("every_index") is EmptyTokenPolicy.EVERY_INDEX


def test_invalid_policy():
    with pytest.raises(ValueError, match="expected one of"):
        SearchConfig(empty_token="never")


def test_output_must_be_callable():
    with pytest.raises(ValueError, match="output"):
        SearchConfig(output=[])


def test_from_mapping_and_as_dict():
    config = SearchConfig.from_mapping({"empty_token": "empty", "output": tuple, "use_numpy": False})
    assert config.as_dict() == {"empty_token": "empty", "output": "tuple", "use_numpy": False}


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown search config keys"):
        SearchConfig.from_mapping({"method": "kmp"})


def test_config_is_frozen():
    config = SearchConfig()
    with pytest.raises(AttributeError):
        config.use_numpy = False

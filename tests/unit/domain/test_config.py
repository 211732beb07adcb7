"""Unit tests for ConfigurationLoader."""

import logging

import pytest

from forbid_imports.domain.config import ConfigurationLoader, RuleOptions
from forbid_imports.domain.errors import ConfigurationError


def test_empty_config_has_no_rules() -> None:
    assert ConfigurationLoader().rule_options == []


def test_rules_array_in_order() -> None:
    loader = ConfigurationLoader(
        {
            "rules": [
                {"package_name_regexp": r".+\.dao\..+", "forbidden_imports_regexp": r".+\.ui\..+",
                 "forbidden_imports_excludes_regexp": r"^.+Exception$"},
                {"class-name-regexp": ".*First.*", "forbidden-imports-regexp": ".*ui.*",
                 "forbidden-imports-excludes-regexp": ""},
            ]
        }
    )
    first, second = loader.rule_options
    assert first == RuleOptions(r".+\.dao\..+", "", r".+\.ui\..+", r"^.+Exception$")
    assert second == RuleOptions("", ".*First.*", ".*ui.*", "")


def test_camel_case_top_level_keys() -> None:
    loader = ConfigurationLoader(
        {"packageNameRegexp": "a", "classNameRegexp": "b",
         "forbiddenImportsRegexp": "c", "forbiddenImportsExcludesRegexp": "d"}
    )
    assert loader.rule_options == [RuleOptions("a", "b", "c", "d")]


def test_top_level_rule_follows_rules_array() -> None:
    loader = ConfigurationLoader(
        {"rules": [{"forbidden_imports_regexp": "x"}], "forbidden_imports_regexp": "y"}
    )
    assert [o.forbidden_imports_regexp for o in loader.rule_options] == ["x", "y"]


def test_non_string_value_raises() -> None:
    with pytest.raises(ConfigurationError, match="must be a string"):
        ConfigurationLoader({"rules": [{"forbidden_imports_regexp": 3}]})


def test_rules_must_be_array_of_tables() -> None:
    with pytest.raises(ConfigurationError):
        ConfigurationLoader({"rules": "nope"})
    with pytest.raises(ConfigurationError):
        ConfigurationLoader({"rules": ["nope"]})


def test_unknown_keys_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="forbid_imports.domain.config"):
        loader = ConfigurationLoader({"rules": [{"forbidden_imports_regexp": "x", "bogus": 1}]})
    assert len(loader.rule_options) == 1
    assert "bogus" in caplog.text

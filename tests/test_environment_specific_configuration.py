"""
Environment-Specific Configuration Tests
----------------------------------------

Exercises the property resolver: strategy classification, each lookup
chain on its own, ``#{...}`` expansion and the prefix query.
"""

import allure
import pytest

from browser_test_support.environment import (
    ConfigurationError,
    EnvironmentSpecificConfiguration,
    EnvironmentStrategy,
    EnvironmentVariables,
    PropertySubstitutionError,
    SystemProperty,
    UndefinedEnvironmentVariableError,
    active_environments_in,
)
from browser_test_support.environment.specific_configuration import (
    contextless_property,
    default_property,
    property_for_named_environments,
)


def configuration(properties: dict) -> EnvironmentSpecificConfiguration:
    return EnvironmentSpecificConfiguration.from_variables(EnvironmentVariables(properties))


@pytest.mark.parametrize(
    "properties, expected",
    [
        ({}, EnvironmentStrategy.NO_ENVIRONMENTS_CONFIGURED),
        ({"environment": "ci", "K": "v"}, EnvironmentStrategy.NO_ENVIRONMENTS_CONFIGURED),
        ({"environments.ci.K": "1"}, EnvironmentStrategy.NAMED_ENVIRONMENT_NOT_CONFIGURED),
        ({"environment": "prod", "environments.ci.K": "1"}, EnvironmentStrategy.NAMED_ENVIRONMENT_NOT_CONFIGURED),
        ({"environments.default.K": "5"}, EnvironmentStrategy.NAMED_ENVIRONMENT_NOT_CONFIGURED),
        ({"environment": "ci", "environments.ci.K": "1"}, EnvironmentStrategy.ENVIRONMENT_CONFIGURED_AND_NAMED),
        (
            {"environment": "prod, ci", "environments.ci.K": "1"},
            EnvironmentStrategy.ENVIRONMENT_CONFIGURED_AND_NAMED,
        ),
    ],
)
def test_strategy_classification(properties: dict, expected: EnvironmentStrategy) -> None:
    assert EnvironmentStrategy.defined_in(EnvironmentVariables(properties)) is expected
    assert configuration(properties).strategy is expected


def test_active_environments_are_trimmed_and_empty_entries_dropped() -> None:
    variables = EnvironmentVariables({"environment": " ci , ,staging,"})
    assert active_environments_in(variables) == ["ci", "staging"]
    assert active_environments_in(EnvironmentVariables()) == []


@pytest.mark.parametrize("environment", [None, "", "ci", "ci,staging", "unknown", "all"])
def test_all_environments_value_applies_everywhere(environment) -> None:
    properties = {"environments.all.K": "V"}
    if environment is not None:
        properties["environment"] = environment
    assert configuration(properties).resolve("K") == "V"


def test_later_listed_environment_wins() -> None:
    properties = {"environments.ci.K": "1", "environments.staging.K": "2"}
    with allure.step("ci then staging"):
        assert configuration({**properties, "environment": "ci,staging"}).resolve("K") == "2"
    with allure.step("staging then ci"):
        assert configuration({**properties, "environment": "staging,ci"}).resolve("K") == "1"


def test_empty_environment_value_does_not_override() -> None:
    config = configuration(
        {"environment": "ci,staging", "environments.ci.K": "1", "environments.staging.K": ""}
    )
    assert config.resolve("K") == "1"


def test_named_environment_falls_back_to_all_then_default_then_raw() -> None:
    properties = {
        "environment": "ci",
        "environments.ci.other": "x",
        "environments.all.from_all": "all",
        "environments.default.from_default": "default",
        "from_raw": "raw",
    }
    config = configuration(properties)
    assert config.resolve("from_all") == "all"
    assert config.resolve("from_default") == "default"
    assert config.resolve("from_raw") == "raw"
    assert config.resolve("absent") is None


def test_raw_property_without_environments() -> None:
    for environment in (None, "ci", "prod,qa"):
        properties = {"K": "foo"}
        if environment:
            properties["environment"] = environment
        assert configuration(properties).resolve("K") == "foo"


def test_default_environment_without_environment_key() -> None:
    assert configuration({"environments.default.K": "5"}).resolve("K") == "5"


def test_unconfigured_named_environment_uses_default_chain() -> None:
    config = configuration({"environment": "prod", "environments.default.K": "5", "environments.ci.K": "1"})
    assert config.resolve("K") == "5"


def test_lookup_chains_in_isolation() -> None:
    variables = EnvironmentVariables(
        {
            "K": "raw",
            "environments.default.K": "default",
            "environments.all.J": "all",
            "environments.qa.K": "qa",
        }
    )
    assert contextless_property(variables, ["qa"], "K") == "raw"
    assert default_property(variables, [], "K") == "default"
    assert default_property(variables, [], "J") == "all"
    assert property_for_named_environments(variables, ["qa"], "K") == "qa"
    assert property_for_named_environments(variables, ["prod"], "K") == "default"
    assert property_for_named_environments(variables, ["qa"], "J") == "all"
    assert EnvironmentStrategy.ENVIRONMENT_CONFIGURED_BUT_UNNAMED.lookup is contextless_property
    assert EnvironmentStrategy.DEFAULT_ONLY_CONFIGURED.lookup is default_property


def test_nested_substitution() -> None:
    assert configuration({"K": "#{nested}", "nested": "42"}).resolve("K") == "42"


def test_nested_substitution_uses_active_environment() -> None:
    config = configuration(
        {
            "environment": "ci",
            "environments.ci.base.url": "https://ci.example.com",
            "environments.default.base.url": "http://localhost",
            "environments.all.home.page": "#{base.url}/home",
        }
    )
    assert config.resolve("home.page") == "https://ci.example.com/home"


def test_substitution_expands_references_inside_replacements() -> None:
    config = configuration({"a": "<#{b}>", "b": "#{c}#{c}", "c": "x"})
    assert config.resolve("a") == "<xx>"


def test_unresolvable_reference_is_left_in_place() -> None:
    config = configuration({"K": "#{missing}-#{n}", "n": "1"})
    assert config.resolve("K") == "#{missing}-1"


def test_replacement_is_spliced_literally() -> None:
    config = configuration({"K": "pay #{price}", "price": "$1\\0"})
    assert config.resolve("K") == "pay $1\\0"


@pytest.mark.parametrize(
    "properties",
    [
        {"a": "#{b}", "b": "#{a}"},
        {"a": "x#{a}"},
    ],
)
def test_substitution_cycle_is_reported(properties: dict) -> None:
    with pytest.raises(PropertySubstitutionError) as excinfo:
        configuration(properties).resolve("a")
    assert excinfo.value.property_name == "a"
    assert excinfo.value.cycle[0] == excinfo.value.cycle[-1] == "a"
    assert " -> " in str(excinfo.value)
    assert isinstance(excinfo.value, ConfigurationError)


def test_many_references_to_one_property_expand() -> None:
    config = configuration({"v": "#{a}" * 70, "a": "1"})
    assert config.resolve("v") == "1" * 70


def test_deep_acyclic_reference_chain_expands() -> None:
    properties = {f"l{level}": f"#{{l{level + 1}}}#{{l{level + 1}}}" for level in range(7)}
    properties["l7"] = "x"
    assert configuration(properties).resolve("l0") == "x" * 128


def test_cycle_is_reported_with_its_path() -> None:
    config = configuration({"top": "#{a}", "a": "#{b}", "b": "#{a}"})
    with pytest.raises(PropertySubstitutionError) as excinfo:
        config.resolve("top")
    assert excinfo.value.cycle == ["top", "a", "b", "a"]


def test_required_property_missing() -> None:
    config = configuration({"environment": "ci,staging", "environments.ci.a": "1"})
    with pytest.raises(UndefinedEnvironmentVariableError) as excinfo:
        config.get_property("webdriver.base.url")
    error = excinfo.value
    assert error.property_name == "webdriver.base.url"
    assert error.environments == ["ci", "staging"]
    assert "webdriver.base.url" in str(error)
    assert "ci" in str(error)


def test_required_property_present() -> None:
    assert configuration({"environments.all.K": "V"}).get_property("K") == "V"


def test_legacy_property_name_fallback() -> None:
    assert configuration({"thucydides.driver": "firefox"}).resolve(SystemProperty.WEBDRIVER_DRIVER) == "firefox"
    both = configuration({"thucydides.driver": "firefox", "webdriver.driver": "chrome"})
    assert both.get_property(SystemProperty.WEBDRIVER_DRIVER) == "chrome"
    assert both.get_optional_property("missing", "webdriver.driver") == "chrome"


def test_required_system_property_error_names_current_property() -> None:
    with pytest.raises(UndefinedEnvironmentVariableError) as excinfo:
        configuration({}).get_property(SystemProperty.WEBDRIVER_BASE_URL)
    assert excinfo.value.property_name == "webdriver.base.url"


def test_integer_property() -> None:
    config = configuration({"timeout": " 30 ", "bad": "thirty"})
    assert config.get_integer_property("timeout") == 30
    with pytest.raises(ConfigurationError):
        config.get_integer_property("bad")


def test_properties_with_prefix() -> None:
    config = configuration({"environments.ci.db.host": "x", "environment": "ci", "other.key": "y"})
    assert config.get_properties_with_prefix("db.") == {"db.host": "x"}


def test_properties_with_prefix_filters_other_environments() -> None:
    config = configuration(
        {
            "environment": "ci",
            "environments.ci.db.host": "x",
            "environments.staging.db.port": "5432",
            "environments.all.db.name": "app",
            "db.user": "sa",
        }
    )
    assert config.get_properties_with_prefix("db.") == {"db.host": "x", "db.user": "sa"}
    assert config.property_group_is_defined_for("db.")
    assert not config.property_group_is_defined_for("cache.")


def test_properties_with_prefix_skips_inactive_shared_scopes() -> None:
    config = configuration(
        {
            "environment": "ci",
            "environments.ci.x": "1",
            "environments.all.db.name": "app",
            "environments.default.db.port": "5432",
        }
    )
    assert config.get_properties_with_prefix("db.") == {}
    assert config.resolve("db.name") == "app"


def test_properties_with_prefix_prefers_environment_value() -> None:
    config = configuration({"environment": "ci", "db.host": "raw", "environments.ci.db.host": "ci"})
    assert config.get_properties_with_prefix("db.") == {"db.host": "ci"}


def test_resolution_is_idempotent_and_sees_later_changes() -> None:
    variables = EnvironmentVariables({"K": "foo"})
    config = EnvironmentSpecificConfiguration(variables)
    assert config.resolve("K") == config.resolve("K") == "foo"
    variables.set_property("K", "bar")
    assert config.resolve("K") == "bar"
    variables.clear_property("K")
    assert config.resolve("K") is None


def test_are_defined_in() -> None:
    assert EnvironmentSpecificConfiguration.are_defined_in(EnvironmentVariables({"environments.ci.a": "1"}))
    assert not EnvironmentSpecificConfiguration.are_defined_in(EnvironmentVariables({"environment": "ci"}))

"""Tests for create_rescript_config.naming module."""

import pytest

from create_rescript_config.naming import first_error, validate_package_name


class TestValidatePackageName:
    """Tests for validate_package_name()."""

    @pytest.mark.parametrize("name", [
        "my-app",
        "some_package",
        "example.com",
        "under_score",
        "period.js",
        "123numeric",
        "@npm/thingy",
        "@jane/foo.js",
    ])
    def test_valid_names(self, name):
        assert validate_package_name(name) == []

    def test_empty(self):
        assert first_error("") == "name length must be greater than zero"

    def test_leading_period(self):
        assert first_error(".start-with-period") == "name cannot start with a period"

    def test_leading_underscore(self):
        assert first_error("_start-with-underscore") == "name cannot start with an underscore"

    def test_surrounding_spaces(self):
        assert "name cannot contain leading or trailing spaces" in validate_package_name(" leading")

    def test_blacklisted(self):
        assert first_error("node_modules") == "node_modules is a blacklisted name"
        assert first_error("favicon.ico") == "favicon.ico is a blacklisted name"

    def test_too_long(self):
        errors = validate_package_name("a" * 215)
        assert errors == ["name can no longer contain more than 214 characters"]

    def test_capital_letters(self):
        assert first_error("CAPITAL-LETTERS") == "name can no longer contain capital letters"

    def test_special_characters(self):
        assert "name can no longer contain special characters (\"~'!()*\")" in \
            validate_package_name("crazy!")

    def test_url_unsafe(self):
        assert first_error("s/l/a/s/h/e/s") == "name can only contain URL-friendly characters"
        assert first_error("with space") == "name can only contain URL-friendly characters"

    def test_scope_with_characters_npm_leaves_unescaped(self):
        assert validate_package_name("@sc!ope/pkg") == []
        assert validate_package_name("@a(b)/pkg") == []

    def test_none_and_non_string(self):
        assert validate_package_name(None) == ["name cannot be null"]
        assert validate_package_name(42) == ["name must be a string"]

    def test_valid_has_no_first_error(self):
        assert first_error("my-app") == ""

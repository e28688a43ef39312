"""Tests for the JavaFX module catalog and closure resolution."""

import pytest

from fxdeps.errors import UnknownModule
from fxdeps.modules import (
    CONCRETE_MODULES,
    MODULE_DEPENDENCIES,
    Module,
    artifact_name,
    coordinate_base,
    dependencies,
    format_coordinate,
    java_module_name,
    ordered_closure,
    parse_module_list,
    resolve_closure,
)


class TestResolveClosure:
    """Closure over the module dependency graph."""

    def test_controls_pulls_base_and_graphics(self):
        assert resolve_closure({Module.CONTROLS}) == {Module.BASE, Module.GRAPHICS, Module.CONTROLS}

    def test_web_is_followed_across_multiple_hops(self):
        assert resolve_closure({Module.WEB}) == {
            Module.BASE, Module.GRAPHICS, Module.CONTROLS, Module.MEDIA, Module.WEB,
        }

    def test_wildcard_returns_whole_catalog_without_itself(self):
        closure = resolve_closure({Module.ALL})
        assert closure == set(CONCRETE_MODULES)
        assert Module.ALL not in closure

    def test_wildcard_ignores_other_selections(self):
        assert resolve_closure({Module.FXML, Module.ALL}) == set(CONCRETE_MODULES)

    def test_empty_selection(self):
        assert resolve_closure(set()) == frozenset()

    def test_duplicates_collapse(self):
        assert resolve_closure([Module.BASE, Module.BASE]) == {Module.BASE}

    @pytest.mark.parametrize("module", list(CONCRETE_MODULES))
    def test_closure_property(self, module):
        closure = resolve_closure({module})
        assert module in closure
        for member in closure:
            for dep in dependencies(member):
                assert dep in closure

    def test_result_is_immutable(self):
        closure = resolve_closure({Module.BASE})
        with pytest.raises(AttributeError):
            closure.add(Module.WEB)

    def test_ordered_closure_follows_catalog_order(self):
        assert ordered_closure({Module.WEB}) == [
            Module.BASE, Module.GRAPHICS, Module.CONTROLS, Module.MEDIA, Module.WEB,
        ]

    def test_adjacency_table_has_no_wildcard(self):
        assert Module.ALL not in MODULE_DEPENDENCIES
        assert dependencies(Module.ALL) == ()


class TestNameFormatting:
    """Artifact and module name formatting."""

    def test_artifact_name(self):
        assert artifact_name(Module.FXML) == "javafx-fxml"

    def test_coordinate_base(self):
        assert coordinate_base(Module.FXML) == "org.openjfx:javafx-fxml"

    def test_java_module_name(self):
        assert java_module_name(Module.CONTROLS) == "javafx.controls"

    def test_format_coordinate(self):
        assert format_coordinate(Module.BASE, "21.0.1", "linux") == "org.openjfx:javafx-base:21.0.1:linux"

    def test_format_coordinate_without_classifier(self):
        assert format_coordinate(Module.BASE, "21.0.1") == "org.openjfx:javafx-base:21.0.1"

    def test_literal_version_round_trips(self):
        notation = format_coordinate(Module.MEDIA, "17.0.2-ea+3", "win")
        assert notation.split(":")[2] == "17.0.2-ea+3"

    def test_wildcard_formats_to_empty(self):
        assert artifact_name(Module.ALL) == ""
        assert coordinate_base(Module.ALL) == ""
        assert java_module_name(Module.ALL) == ""
        assert format_coordinate(Module.ALL, "21", "mac") == ""


class TestParseModuleList:
    """Parsing module names from configuration text."""

    def test_semicolon_string_case_insensitive(self):
        assert parse_module_list("Controls; FXML ;web") == {Module.CONTROLS, Module.FXML, Module.WEB}

    def test_iterable(self):
        assert parse_module_list(["base", "ALL"]) == {Module.BASE, Module.ALL}

    def test_blank_entries_skipped(self):
        assert parse_module_list(";;base;") == {Module.BASE}

    def test_empty_string(self):
        assert parse_module_list("") == frozenset()

    def test_unknown_module(self):
        with pytest.raises(UnknownModule):
            parse_module_list("base;charts")

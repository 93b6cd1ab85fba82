"""End-to-end scenarios through the build-cycle plugin."""

import pytest

from fixtures.sources import (
    ALREADY_PREFIXED,
    CLASS_ATTRIBUTE,
    CLASS_NAME_ATTRIBUTE,
    CLSX_CALL,
    CUSTOM_CLASS,
    DYNAMIC_TEMPLATE,
    STATIC_TEMPLATE,
)

pytestmark = pytest.mark.integration


def run_transform(plugin, code, file_id="Component.tsx"):
    result = plugin.transform(code, file_id)
    return result.code if result is not None else None


class TestPrefixScenarios:
    """Scenarios from a typical component tree with prefix ``tw-``."""

    @pytest.fixture
    def plugin(self, make_plugin):
        return make_plugin(prefix_override="tw-")

    def test_class_name_string(self, plugin):
        """Test className string literals."""
        result = run_transform(plugin, CLASS_NAME_ATTRIBUTE)
        assert 'className="tw-bg-red-500 tw-text-white"' in result

    def test_class_attribute(self, plugin):
        """Test the class attribute."""
        result = run_transform(plugin, CLASS_ATTRIBUTE)
        assert 'class="tw-flex tw-items-center"' in result

    def test_already_prefixed(self, plugin):
        """Test that already prefixed classes are kept."""
        result = run_transform(plugin, ALREADY_PREFIXED)
        assert result == ALREADY_PREFIXED
        assert 'className="tw-bg-blue-500 tw-bg-red-500"' in result

    def test_static_template(self, plugin):
        """Test template literals without substitutions."""
        result = run_transform(plugin, STATIC_TEMPLATE)
        assert 'className="tw-bg-red-500 tw-text-white"' in result

    def test_clsx_call(self, plugin):
        """Test clsx arguments, leaving the condition untouched."""
        result = run_transform(plugin, CLSX_CALL)
        assert 'clsx("tw-bg-red-500", cond && "tw-text-white")' in result
        assert 'import clsx from "clsx";' in result

    def test_non_utility_classes(self, plugin):
        """Test that non-utility classes are left as written."""
        result = run_transform(plugin, CUSTOM_CLASS)
        assert 'className="custom-class"' in result

    def test_dynamic_template(self, plugin):
        """Test that dynamic templates are never rewritten."""
        assert run_transform(plugin, DYNAMIC_TEMPLATE) == DYNAMIC_TEMPLATE

    @pytest.mark.parametrize(
        "code",
        [CLASS_NAME_ATTRIBUTE, CLASS_ATTRIBUTE, STATIC_TEMPLATE, CLSX_CALL],
    )
    def test_whole_pipeline_idempotence(self, plugin, code):
        """Test that a second pass over rewritten output is byte-identical."""
        once = run_transform(plugin, code)
        assert run_transform(plugin, once) == once

    def test_line_count_preserved(self, plugin):
        """Test that single-line rewrites keep line numbers stable."""
        result = run_transform(plugin, CLSX_CALL)
        assert result.count("\n") == CLSX_CALL.count("\n")

"""Tests for the build-cycle plugin lifecycle."""

import pytest

from tw_prefixer.config.settings import PrefixerOptions
from tw_prefixer.exceptions import BuildStateError, ConfigError
from tw_prefixer.plugin import PrefixerPlugin


class TestPrefixerPlugin:
    """Tests for PrefixerPlugin."""

    def test_transform_before_build_start(self, temp_dir):
        """Test that transforms require a started build cycle."""
        plugin = PrefixerPlugin(PrefixerOptions(prefix_override="tw-", root=temp_dir))
        with pytest.raises(BuildStateError):
            plugin.transform('<div className="flex" />', "App.tsx")

    def test_filtered_files_return_none(self, make_plugin):
        """Test that excluded or non-source ids are skipped."""
        plugin = make_plugin(prefix_override="tw-")
        code = '<div className="flex" />'
        assert plugin.transform(code, "styles.css") is None
        assert plugin.transform(code, "node_modules/lib/App.tsx") is None
        assert plugin.transform(code, "src/App.tsx") is not None

    def test_custom_filters(self, make_plugin):
        """Test user include/exclude patterns."""
        plugin = make_plugin(
            prefix_override="tw-",
            include=r"\.vue\.tsx$",
            exclude=lambda file_id: "legacy" in file_id,
        )
        code = '<div className="flex" />'
        assert plugin.transform(code, "src/App.tsx") is None
        assert plugin.transform(code, "src/legacy/App.vue.tsx") is None
        assert plugin.transform(code, "src/App.vue.tsx").changed

    def test_build_start_resets_config(self, temp_dir):
        """Test that each build cycle re-resolves the prefix."""
        options = PrefixerOptions(prefix_override="tw-", root=temp_dir)
        plugin = PrefixerPlugin(options)
        assert plugin.build_start().prefix == "tw-"

        options.prefix_override = "app-"
        plugin.build_start()
        result = plugin.transform('<div className="flex" />', "App.jsx")
        assert result.code == '<div className="app-flex" />'

    def test_prefix_from_tailwind_config(self, temp_dir, make_plugin):
        """Test that the prefix is discovered from the Tailwind config."""
        (temp_dir / "tailwind.config.js").write_text(
            "module.exports = {\n  prefix: 'tw-',\n  content: ['./src/**/*.tsx'],\n};\n"
        )
        plugin = make_plugin()
        assert plugin.config.prefix == "tw-"

    def test_no_prefix_means_unchanged(self, make_plugin):
        """Test that without any prefix the source is returned unchanged."""
        plugin = make_plugin()
        code = '<div className="flex" />'
        result = plugin.transform(code, "App.tsx")
        assert not result.changed
        assert result.code == code

    def test_invalid_prefix(self, make_plugin):
        """Test that an unusable prefix fails at build start."""
        with pytest.raises(ConfigError, match="forbidden"):
            make_plugin(prefix_override="tw prefix")

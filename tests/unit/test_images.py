"""Unit tests for the image viewer and script helpers."""

import pytest
from markupsafe import Markup

from r2resize.components import add_jquery, expand_image
from r2resize.components.images import js_string
from r2resize.config import DEFAULT_GALLERY_STYLESHEETS, load_config_from_dict, set_config
from r2resize.errors import InvalidOptionError


class TestExpandImage:
    """Tests for expand_image."""

    def test_single_id(self) -> None:
        """Test viewer dependencies and one init script."""
        html = str(expand_image("photos"))

        for href in DEFAULT_GALLERY_STYLESHEETS:
            assert f'<link rel="stylesheet" href="{href}">' in html
        assert "lightgallery-all.min.js" in html
        assert "justified-gallery" in html
        assert 'var $initScope1 = $("#photos");' in html
        assert ".justifiedGallery(" in html
        assert ".lightGallery(" in html

    def test_multiple_ids_numbered(self) -> None:
        """Test that each container gets its own scope variable."""
        html = str(expand_image(["one", "two"]))

        assert 'var $initScope1 = $("#one");' in html
        assert 'var $initScope2 = $("#two");' in html

    def test_no_ids(self) -> None:
        """Test that an empty list only adds the dependencies."""
        html = str(expand_image([]))

        assert "$initScope" not in html
        assert "lightgallery" in html

    def test_ids_escaped(self) -> None:
        """Test that ids cannot break out of the script."""
        html = str(expand_image('x"</script><b>'))

        assert '$("#x\\"<\\/script><b>")' in html
        assert "<b>" not in html.replace('$("#x\\"<\\/script><b>")', "")

    def test_configured_assets(self) -> None:
        """Test gallery assets from configuration."""
        set_config(
            load_config_from_dict(
                {"assets": {"gallery_stylesheets": ["/g.css"], "gallery_scripts": ["/g.js"]}}
            )
        )
        html = str(expand_image("a"))

        assert '<link rel="stylesheet" href="/g.css">' in html
        assert '<script src="/g.js"></script>' in html
        assert "cdnjs" not in html

    def test_js_string(self) -> None:
        """Test JavaScript string quoting."""
        assert js_string("#a") == '"#a"'
        assert js_string("</") == '"<\\/"'


class TestAddJquery:
    """Tests for add_jquery."""

    def test_default(self) -> None:
        """Test the default jQuery tag."""
        assert add_jquery() == Markup(
            '<script src="https://code.jquery.com/jquery-3.5.1.min.js" '
            'crossorigin="anonymous"></script>'
        )

    def test_version(self) -> None:
        """Test a specific version."""
        assert "jquery-3.6.4.min.js" in add_jquery("3.6.4")

    def test_configured_cdn(self) -> None:
        """Test CDN and version from configuration."""
        set_config(
            load_config_from_dict(
                {"assets": {"jquery_cdn": "https://cdn.test/js/", "jquery_version": "2.2"}}
            )
        )

        assert 'src="https://cdn.test/js/jquery-2.2.min.js"' in add_jquery()

    @pytest.mark.parametrize("version", ["latest", "3.5.1\"><script>", ""])
    def test_invalid_version(self, version: str) -> None:
        """Test that invalid versions raise."""
        with pytest.raises(InvalidOptionError, match="version"):
            add_jquery(version)

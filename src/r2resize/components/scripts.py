"""Script dependencies of the components."""

from markupsafe import Markup

from r2resize.config import get_config
from r2resize.models.options import check_version


def add_jquery(version: str | None = None) -> Markup:
    """Script tag loading jQuery from the configured CDN.

    The image viewer needs jQuery; documents that do not load it already
    can add this tag once.

    Args:
        version: jQuery version (default from config, "3.5.1")

    Returns:
        <script> tag as Markup

    Raises:
        InvalidOptionError: If version is not a dotted version number
    """
    assets = get_config().assets
    version = check_version(version if version is not None else assets.jquery_version)
    return Markup('<script src="{0}/jquery-{1}.min.js" crossorigin="anonymous"></script>').format(
        assets.jquery_cdn, version
    )

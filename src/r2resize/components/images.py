"""Image viewer for containers of images.

expand_image() turns each listed container into a justified thumbnail grid
whose images open in a lightbox with zoom, download and thumbnail
navigation.
"""

import json
import logging
from collections.abc import Iterable

from markupsafe import Markup

from r2resize.components.base import render_component, theme_assets
from r2resize.config import get_config

logger = logging.getLogger(__name__)

INIT_SCRIPT = (
    "$(document).ready(function() {{ var $initScope{key} = $({selector}); "
    "if ($initScope{key}.length) {{ $initScope{key}.justifiedGallery( {{ border: -1, "
    "rowHeight: 150, margins: 8, waitThumbnailsLoad: true, randomize: false, }})"
    '.on("jg.complete", function() {{ $initScope{key}.lightGallery( {{ thumbnail: true, '
    "animateThumb: true, showThumbByDefault: true, }}); }}); }}; "
    '$initScope{key}.on("onAfterOpen.lg", function(event) {{ '
    '$("body").addClass("overflow-hidden"); }}); '
    '$initScope{key}.on("onCloseAfter.lg", function(event) {{ '
    '$("body").removeClass("overflow-hidden"); }}); }});'
)


def js_string(value: str) -> str:
    """Quote a value as a JavaScript string literal safe inside <script>.

    Examples:
        >>> js_string('a"b')
        '"a\\\\"b"'
    """
    return json.dumps(value).replace("</", "<\\/")


def init_script(key: int, image_id: str) -> Markup:
    """Gallery initialisation script for one container."""
    return Markup(INIT_SCRIPT.format(key=key, selector=js_string(f"#{image_id}")))


def expand_image(image_ids: str | Iterable[str]) -> Markup:
    """Attach the image viewer to one or more image containers.

    Args:
        image_ids: Id of a container holding images, or a list of ids

    Returns:
        Viewer dependencies and one initialisation script per container
    """
    if isinstance(image_ids, str):
        image_ids = [image_ids]
    ids = [str(image_id) for image_id in image_ids]
    if not ids:
        logger.debug("expand_image called without container ids")

    assets = get_config().assets
    return render_component(
        "expand_image.html.j2",
        stylesheets=assets.gallery_stylesheets,
        scripts=assets.gallery_scripts,
        assets=theme_assets(css="imgviewer.css"),
        init_scripts=[init_script(key, image_id) for key, image_id in enumerate(ids, start=1)],
    )

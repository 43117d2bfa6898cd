"""URLs for prose guide pages."""

DEFAULT_GUIDE_PREFIX = "guide-"
GUIDE_EXTENSION = ".html"
EXTERNAL_SCHEMES = ("https://", "http://")


def generate_guide_url(
    file: str,
    guide_url: str,
    guide_prefix: str = DEFAULT_GUIDE_PREFIX,
) -> str:
    """Generate the URL of a guide page from its Markdown file name.

    ``intro/start.md#setup`` -> ``<guide_url>/guide-start.html#setup``.
    Absolute web URLs are returned unchanged.
    """
    if any(scheme in file for scheme in EXTERNAL_SCHEMES):
        return file

    fragment = ""
    pos = file.find("#")
    if pos != -1:
        fragment = file[pos:]
        file = file[:pos]

    base = file.rstrip("/").rsplit("/", 1)[-1]
    if base.endswith(".md") and base != ".md":
        base = base[: -len(".md")]

    return f"{guide_url.rstrip('/')}/{guide_prefix}{base}{GUIDE_EXTENSION}{fragment}"

"""Common literal values used across raydi_manual.

These constants keep filenames, fences, and section names centralized so the
builders, the configuration defaults, and tests import the same values
without drifting. Intended for internal use within the raydi_manual package.

Examples
--------
>>> from raydi_manual import _constants
>>> _constants.NAVIGATION_TEMPLATE.format(version="1.0", language="en")
'_includes/manuals/1.0/en/contents.html'
>>> _constants.HORIZONTAL_RULE
'---'
"""

DEFAULT_CONFIG_PATH = "config/manual.yaml"
DEFAULT_VERSION = "1.0"
DEFAULT_MANUALS_DIR = "manuals"
DEFAULT_SITE_DIR = "_site"

HORIZONTAL_RULE = "---"

LLMS_INDEX = "llms.txt"
LLMS_OUTPUT = "llms-full.txt"
LINKABLE_SECTIONS = (
    "Docs",
    "Bindings",
    "Advanced Features",
    "Best Practices",
    "Performance",
)
TOC_ONLY_SECTIONS = ("Optional",)
LINK_PREFIX_TEMPLATE = "/manuals/{version}/en/"

ONE_PAGE_OUTPUT = "1page.md"
ONE_PAGE_TITLE = "Ray.Di Complete Manual"
ONE_PAGE_CATEGORY = "Manual"
ONE_PAGE_LAYOUT_TEMPLATE = "docs-{language}"
PERMALINK_TEMPLATE = "/manuals/{version}/{language}/1page.html"
NAVIGATION_TEMPLATE = "_includes/manuals/{version}/{language}/contents.html"
SKIP_PAGES = ("ai-assistant", "index", "1page")
SUPPLEMENTARY_DIR = "bp"
SUPPLEMENTARY_HEADING = "Best Practices Details"

INTRO_MESSAGES = {
    "en": (
        "This comprehensive manual contains all Ray.Di documentation in a "
        "single page for easy reference, printing, or offline viewing."
    ),
    "ja": (
        "このページは、Ray.Diの全ドキュメントを1ページにまとめた包括的なマニュアルです。"
        "参照、印刷、オフライン閲覧に便利です。"
    ),
}

"""
config.py - Typed view over config.ini

Wraps a ConfigParser so the rest of the code reads attributes
instead of raw section lookups.
"""

DEFAULT_STYLESHEETS = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css,"
    "tagcloud.css"
)

HTML_INPUT_CHOICES = {"auto", "yes", "no"}


class Config(object):
    """
    Tag cloud settings.

    Sections:
        [CLOUD]             FONTMIN, FONTMAX
        [OUTPUT]            STYLESHEETS (comma separated hrefs)
        [LOCAL PROPERTIES]  ENCODING, LOGDIR, HTMLINPUT
    """

    def __init__(self, config):
        self.font_min = config.getint("CLOUD", "FONTMIN", fallback=11)
        self.font_max = config.getint("CLOUD", "FONTMAX", fallback=48)
        assert 0 < self.font_min <= self.font_max, \
            "FONTMIN must be positive and not greater than FONTMAX"

        stylesheets = config.get("OUTPUT", "STYLESHEETS", fallback=DEFAULT_STYLESHEETS)
        self.stylesheets = [href.strip() for href in stylesheets.split(",") if href.strip()]

        self.encoding = config.get("LOCAL PROPERTIES", "ENCODING", fallback="utf-8").strip()
        self.log_dir = config.get("LOCAL PROPERTIES", "LOGDIR", fallback="Logs").strip()
        self.html_input = config.get("LOCAL PROPERTIES", "HTMLINPUT", fallback="no").strip().lower()
        assert self.html_input in HTML_INPUT_CHOICES, \
            f"HTMLINPUT must be one of {sorted(HTML_INPUT_CHOICES)}"

__version__ = "0.1"

from .codec import escape, unescape, unescape_to_bytes
from .errors import UriError, InvalidArgument, InvalidBase, UnparsableInput
from .uri import Authority, ParsedURI, parse, parse_uri, parse_relative_ref, parse_uri_reference
from .paths import URIPath, remove_dot_segments, merge, common_prefix_length
from .relative import relativize
from .resolution import join, parse_base, resolve
from .vector import ComponentRecord, url_absolute, url_relative, url_parse, url_escape, url_unescape

__all__ = (
    "Authority",
    "ComponentRecord",
    "InvalidArgument",
    "InvalidBase",
    "ParsedURI",
    "URIPath",
    "UnparsableInput",
    "UriError",
    "common_prefix_length",
    "escape",
    "join",
    "merge",
    "parse",
    "parse_base",
    "parse_relative_ref",
    "parse_uri",
    "parse_uri_reference",
    "relativize",
    "remove_dot_segments",
    "resolve",
    "unescape",
    "unescape_to_bytes",
    "url_absolute",
    "url_escape",
    "url_parse",
    "url_relative",
    "url_unescape",
)

# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
import locale
from urllib.parse import urlsplit, urlunsplit

from traced_poller.protocol import Outcome, RequestDescriptor


def reconstruct_url(url: str) -> str:
    """Rebuilds a URL from its scheme, host, port, path, query and fragment.

    The host keeps its original case and brackets. User information is not
    carried over, and neither is an empty ``?`` or ``#`` marker. Raises
    ``ValueError`` when the URL has no host or an invalid port.
    """
    parsed = urlsplit(url)
    if not parsed.hostname:
        raise ValueError("URL has no host: {}".format(url))
    hostport = parsed.netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host = hostport[: hostport.index("]") + 1]
    else:
        host = hostport.partition(":")[0]
    port = parsed.port
    netloc = host if port is None else "{}:{}".format(host, port)
    return urlunsplit(
        (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
    )


def build_url(options) -> str:
    return reconstruct_url(RequestDescriptor.from_options(options).url)


def default_encoding() -> str:
    return locale.getpreferredencoding(False)


def print_outcome(outcome: Outcome) -> None:
    print("Response Code: {}".format(outcome.status_code))
    print("Response Msg: {}".format(outcome.message))

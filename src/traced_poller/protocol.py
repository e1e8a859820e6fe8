# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
from enum import Enum


class BaseObject:
    __slots__ = ()

    def __repr__(self):
        tmp = {}

        for key in self.__slots__:
            data = getattr(self, key, None)
            if isinstance(data, BaseObject):
                tmp[key] = repr(data)
            else:
                tmp[key] = data

        return repr(tmp)


class RequestDescriptor(BaseObject):
    __slots__ = ("scheme", "host", "port", "path", "query", "fragment")

    def __init__(
        self,
        scheme="http",
        host="127.0.0.1",
        port=8080,
        path="/ping",
        query="",
        fragment="",
    ) -> None:
        self.scheme = scheme
        self.host = host
        self.port = port
        self.path = path
        self.query = query
        self.fragment = fragment

    @classmethod
    def from_options(cls, options) -> "RequestDescriptor":
        return cls(
            scheme=options.scheme,
            host=options.host,
            port=options.port,
            path=options.path,
        )

    @property
    def url(self) -> str:
        host = self.host
        # IPv6 literals must be bracketed inside the authority
        if ":" in host:
            host = "[{}]".format(host)
        url = "{}://{}:{}{}".format(self.scheme, host, self.port, self.path)
        if self.query:
            url += "?" + self.query
        if self.fragment:
            url += "#" + self.fragment
        return url


class OutcomeKind(Enum):
    SUCCESS = 0
    HTTP_ERROR = 1
    TRANSPORT_ERROR = 2


class Outcome(BaseObject):
    """Result of one request attempt.

    ``status_code`` stays at ``0`` when no response was received.
    ``error`` holds the exception raised by the transport, if any.
    """

    __slots__ = ("status_code", "content", "error", "kind")

    def __init__(
        self, status_code=0, content="", error=None, kind=OutcomeKind.SUCCESS
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.error = error
        self.kind = kind

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        return self.content

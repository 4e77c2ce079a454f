"""HTTP request methods, status codes and their reason phrases."""

from __future__ import annotations

from enum import IntEnum, StrEnum

__all__ = ["Method", "Status", "status_text"]


class Method(StrEnum):
    """HTTP request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


class Status(IntEnum):
    """HTTP status codes as registered with IANA."""

    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102
    EARLY_HINTS = 103

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFO = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    ALREADY_REPORTED = 208
    IM_USED = 226

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    # 306 is unused.
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTH_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUESTED_RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    TOO_EARLY = 425
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511

    def text(self) -> str:
        """Return the reason phrase for this status."""
        return _STATUS_TEXT[self]


_STATUS_TEXT: dict[int, str] = {
    Status.CONTINUE: "Continue",
    Status.SWITCHING_PROTOCOLS: "Switching Protocols",
    Status.PROCESSING: "Processing",
    Status.EARLY_HINTS: "Early Hints",
    Status.OK: "OK",
    Status.CREATED: "Created",
    Status.ACCEPTED: "Accepted",
    Status.NON_AUTHORITATIVE_INFO: "Non-Authoritative Information",
    Status.NO_CONTENT: "No Content",
    Status.RESET_CONTENT: "Reset Content",
    Status.PARTIAL_CONTENT: "Partial Content",
    Status.MULTI_STATUS: "Multi-Status",
    Status.ALREADY_REPORTED: "Already Reported",
    Status.IM_USED: "IM Used",
    Status.MULTIPLE_CHOICES: "Multiple Choices",
    Status.MOVED_PERMANENTLY: "Moved Permanently",
    Status.FOUND: "Found",
    Status.SEE_OTHER: "See Other",
    Status.NOT_MODIFIED: "Not Modified",
    Status.USE_PROXY: "Use Proxy",
    Status.TEMPORARY_REDIRECT: "Temporary Redirect",
    Status.PERMANENT_REDIRECT: "Permanent Redirect",
    Status.BAD_REQUEST: "Bad Request",
    Status.UNAUTHORIZED: "Unauthorized",
    Status.PAYMENT_REQUIRED: "Payment Required",
    Status.FORBIDDEN: "Forbidden",
    Status.NOT_FOUND: "Not Found",
    Status.METHOD_NOT_ALLOWED: "Method Not Allowed",
    Status.NOT_ACCEPTABLE: "Not Acceptable",
    Status.PROXY_AUTH_REQUIRED: "Proxy Authentication Required",
    Status.REQUEST_TIMEOUT: "Request Timeout",
    Status.CONFLICT: "Conflict",
    Status.GONE: "Gone",
    Status.LENGTH_REQUIRED: "Length Required",
    Status.PRECONDITION_FAILED: "Precondition Failed",
    Status.REQUEST_ENTITY_TOO_LARGE: "Request Entity Too Large",
    Status.REQUEST_URI_TOO_LONG: "Request URI Too Long",
    Status.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    Status.REQUESTED_RANGE_NOT_SATISFIABLE: "Requested Range Not Satisfiable",
    Status.EXPECTATION_FAILED: "Expectation Failed",
    Status.TEAPOT: "I'm a teapot",
    Status.MISDIRECTED_REQUEST: "Misdirected Request",
    Status.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    Status.LOCKED: "Locked",
    Status.FAILED_DEPENDENCY: "Failed Dependency",
    Status.TOO_EARLY: "Too Early",
    Status.UPGRADE_REQUIRED: "Upgrade Required",
    Status.PRECONDITION_REQUIRED: "Precondition Required",
    Status.TOO_MANY_REQUESTS: "Too Many Requests",
    Status.REQUEST_HEADER_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
    Status.UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable For Legal Reasons",
    Status.INTERNAL_SERVER_ERROR: "Internal Server Error",
    Status.NOT_IMPLEMENTED: "Not Implemented",
    Status.BAD_GATEWAY: "Bad Gateway",
    Status.SERVICE_UNAVAILABLE: "Service Unavailable",
    Status.GATEWAY_TIMEOUT: "Gateway Timeout",
    Status.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
    Status.VARIANT_ALSO_NEGOTIATES: "Variant Also Negotiates",
    Status.INSUFFICIENT_STORAGE: "Insufficient Storage",
    Status.LOOP_DETECTED: "Loop Detected",
    Status.NOT_EXTENDED: "Not Extended",
    Status.NETWORK_AUTHENTICATION_REQUIRED: "Network Authentication Required",
}


def status_text(code: int) -> str:
    """Return the reason phrase for an HTTP status code, or "" if unknown."""
    return _STATUS_TEXT.get(code, "")
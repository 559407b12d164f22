"""
Transport Directives

Names of the directives a client applies to its transport, and of the
values a transport reports back after a request has been performed.
"""


class Opt:
    """Transport directive names understood by every transport."""

    URL = "URL"
    PORT = "PORT"

    # Verb selection (each one overrides the others)
    HTTPGET = "HTTPGET"
    POST = "POST"
    PUT = "PUT"

    TIMEOUT = "TIMEOUT"
    BODY = "BODY"

    # Emit the response header block in front of the body
    HEADER = "HEADER"


VERB_OPTIONS = {
    Opt.HTTPGET: "GET",
    Opt.POST: "POST",
    Opt.PUT: "PUT",
}


class Info:
    """Values a transport exposes after `perform()`."""

    HEADER_SIZE = "HEADER_SIZE"
    RESPONSE_CODE = "RESPONSE_CODE"

"""Building blocks for HTTP requests: URLs, headers, parameters, cookies, authentication, options, callbacks, responses and async results."""

__version__ = "1.11.1"
# lanternhttp

Building blocks for small HTTP servers, written with the standard library only.

## Modules

- `lanternhttp.status`: the `HttpStatus` enum (an `IntEnum`), `status_message()`,
  which returns the reason phrase or `"Unknown Status"`, and the checks
  `is_informational()`, `is_successful()`, `is_redirection()`,
  `is_client_error()` and `is_server_error()`.
- `lanternhttp.datetimes`: `parse_http_date()` turns an RFC 1123 date such as
  `"Sun, 06 Nov 1994 08:49:37 GMT"` into a Unix timestamp and raises
  `ValueError` for anything else; `format_http_date()` does the reverse.
- `lanternhttp.request`: `HttpRequest`, a dataclass holding method (stored upper
  case), path, headers, body and query parameters, with `header()`,
  `query_param()` and the conditional checks `check_if_modified_since()`,
  `check_if_unmodified_since()`, `check_if_none_match()` and `check_if_match()`.
- `lanternhttp.response`: `HttpResponse`, with `set_header()`, `header()`,
  `has_header()`, `remove_header()`, `set_body()` (which keeps
  `Content-Length` in step), `should_compress()` and the `create()`
  constructor. `build()` returns the response as bytes with a plain body;
  `build_chunked()` returns it with chunked transfer coding. Headers are
  written in sorted order of name.
- `lanternhttp.negotiation`: `negotiate()` picks the response that best fits a
  request's `Accept`, `Accept-Language`, `Accept-Encoding` and `Accept-Charset`
  headers, falling back to the first response and raising `NegotiationError`
  when given none. `parse_quality_values()` and the `negotiate_content_type()`,
  `negotiate_language()`, `negotiate_encoding()` and `negotiate_charset()`
  helpers are public too.
- `lanternhttp.compression`: `compress()`, `decompress()` and
  `decompress_to_string()` work on zlib streams and raise `CompressionError`
  on failure. `CompressionPolicy` holds a `CompressionConfig` (enabled,
  minimum size, preferred codings) per content type, with `"type/*"`
  wildcards and a default.
- `lanternhttp.middleware`: `apply_compression()` compresses a response in
  place when the policy and the request's `Accept-Encoding` allow it, and
  returns whether it did; `choose_compression_algorithm()` and
  `compress_response()` are the steps it uses. Both `gzip` and `deflate` are
  answered with a zlib stream.
- `lanternhttp.processor`: `HttpProcessor.process()` negotiates among given or
  prepared representations, answering 404 when there are none and 500 when
  something fails. Subclasses override `prepare_responses()` and
  `create_error_response()`; the base class serves JSON, XML and HTML
  representations for `/example`.
- `lanternhttp.health`: `check_health()` returns a JSON `HttpResponse` with the
  load average, memory and disk use as percentages and component flags.
- `lanternhttp.config`: `Config`, JSON configuration with `load_from_file()`
  (raising `ConfigError`), `get()`, `set()` and dotted-path `get_nested()` and
  `set_nested()`.
- `lanternhttp.logger`: `Logger`, a thread-safe logger writing
  `[timestamp] [LEVEL] message` lines to a stream and, after `open_file()`,
  to a file; `Level` gives the severities and `get_logger()` the shared
  logger.
- `lanternhttp.thread_pool`: `ThreadPool`, whose `submit()` returns a
  `concurrent.futures.Future`; `shutdown()` runs the queued tasks and waits,
  and later submissions raise `PoolStoppedError`. It is also a context manager.
- `lanternhttp.token_bucket`: `TokenBucket`, a rate limiter with
  `try_consume()` and `current_tokens`.

## What it does not do

The package has no server: it opens no sockets, accepts no connections and
offers no command to run. It does not parse raw request text into an
`HttpRequest` and has no router; those are left to the program that uses it.

## Installation

```
pip install .
```

## Example

```python
from lanternhttp.request import HttpRequest
from lanternhttp.processor import HttpProcessor

request = HttpRequest("get", "/example", {"Accept": "application/xml"}, "")
response = HttpProcessor().process(request)
print(response.build().decode("utf-8"))
```

```python
from lanternhttp.config import Config

config = Config()
config.set_nested("server.port", 8080)
assert config.get_nested("server.port", 0) == 8080
```

```python
from lanternhttp.token_bucket import TokenBucket

bucket = TokenBucket(10, 5.0)
if bucket.try_consume(1):
    ...
```

## Running the tests

```
pip install .[test]
pytest
```
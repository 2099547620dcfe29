from lanternhttp.response import HttpResponse
from lanternhttp.status import HttpStatus


def split_message(raw: bytes):
    head, _, body = raw.partition(b"\r\n\r\n")
    status_line, *header_lines = head.decode().split("\r\n")
    names = [line.split(": ", 1)[0] for line in header_lines]
    return status_line, names, body


def test_constructor_sets_type_and_length():
    response = HttpResponse(HttpStatus.OK, "hello", "text/plain")
    assert response.header("Content-Type") == "text/plain"
    assert response.header("Content-Length") == str(len("hello"))


def test_default_content_type_is_html():
    assert HttpResponse(HttpStatus.OK, "x").header("Content-Type") == "text/html"


def test_content_length_counts_utf8_bytes():
    text = "h\u00e9llo"
    response = HttpResponse(HttpStatus.OK, text)
    assert response.header("Content-Length") == str(len(text.encode("utf-8")))


def test_build_exact_bytes():
    response = HttpResponse(HttpStatus.OK, "Hello World!", "text/plain")
    assert response.build() == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Length: 12\r\n"
        b"Content-Type: text/plain\r\n"
        b"\r\n"
        b"Hello World!"
    )


def test_build_chunked_exact_bytes():
    response = HttpResponse(HttpStatus.OK, "This is a chunked response example", "text/plain")
    assert response.build_chunked() == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/plain\r\n"
        b"Transfer-Encoding: chunked\r\n"
        b"\r\n"
        b"22\r\n"
        b"This is a chunked response example\r\n"
        b"0\r\n\r\n"
    )


def test_headers_written_in_sorted_order():
    response = HttpResponse(HttpStatus.NOT_FOUND, "missing")
    response.set_header("X-Trace", "abc")
    response.set_header("Connection", "close")
    _, names, body = split_message(response.build())
    assert names == sorted(names)
    assert body == b"missing"


def test_chunked_omits_content_length():
    response = HttpResponse(HttpStatus.OK, "data")
    _, names, _ = split_message(response.build_chunked())
    assert "Content-Length" not in names
    assert "Transfer-Encoding" in names


def test_header_access():
    response = HttpResponse()
    assert response.header("Missing") == ""
    assert response.has_header("Missing") is False
    response.set_header("X-Key", "v")
    assert response.has_header("X-Key") is True
    response.remove_header("X-Key")
    assert response.has_header("X-Key") is False
    response.remove_header("X-Key")
    assert response.header("X-Key") == ""


def test_set_body_updates_length():
    response = HttpResponse(HttpStatus.OK, "short")
    payload = b"\x1f\x8b\x00\x01\x02"
    response.set_body(payload)
    assert response.content == payload
    assert response.header("Content-Length") == str(len(payload))
    assert response.build().endswith(payload)


def test_create_with_known_code():
    response = HttpResponse.create(404, "gone", {"X-Reason": "test"})
    assert response.status is HttpStatus.NOT_FOUND
    assert response.header("X-Reason") == "test"
    assert response.content == "gone"


def test_create_with_unknown_code():
    response = HttpResponse.create(799, "", {})
    status_line, _, _ = split_message(response.build())
    assert status_line == "HTTP/1.1 799 Unknown Status"


def test_create_headers_override_defaults():
    response = HttpResponse.create(200, "{}", {"Content-Type": "application/json"})
    assert response.header("Content-Type") == "application/json"


def test_should_compress():
    assert HttpResponse(HttpStatus.OK, "body").should_compress() is True
    assert HttpResponse(HttpStatus.OK, "").should_compress() is False
    assert HttpResponse(HttpStatus.NO_CONTENT, "body").should_compress() is False
    assert HttpResponse(HttpStatus.NOT_MODIFIED, "body").should_compress() is False
    assert HttpResponse(HttpStatus.CONTINUE, "body").should_compress() is False


def test_chunked_body_round_trip():
    content = "abc" * 50
    raw = HttpResponse(HttpStatus.OK, content).build_chunked()
    _, _, body = raw.partition(b"\r\n\r\n")
    size_line, _, rest = body.partition(b"\r\n")
    size = int(size_line, 16)
    assert size == len(content)
    assert rest[:size] == content.encode()
    assert rest[size:] == b"\r\n0\r\n\r\n"
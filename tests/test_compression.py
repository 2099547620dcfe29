import zlib

import pytest

from lanternhttp.compression import (
    CompressionConfig,
    CompressionError,
    CompressionPolicy,
    compress,
    decompress,
    decompress_to_string,
)


def test_round_trip_bytes():
    data = bytes(range(256)) * 4
    assert decompress(compress(data)) == data


def test_round_trip_text():
    text = "héllo wörld " * 20
    assert decompress_to_string(compress(text)) == text


def test_output_is_zlib_stream():
    assert zlib.decompress(compress(b"payload")) == b"payload"


def test_repetitive_data_shrinks():
    data = b"a" * 5000
    assert len(compress(data)) < len(data)


def test_decompress_rejects_garbage():
    with pytest.raises(CompressionError):
        decompress(b"not a zlib stream")


def test_decompress_to_string_rejects_non_utf8():
    with pytest.raises(CompressionError):
        decompress_to_string(compress(b"\xff\xfe\xfd"))


def test_config_defaults():
    config = CompressionConfig()
    assert config.enabled is True
    assert config.min_size_to_compress == 1024
    assert config.preferred_algorithms == ()


def test_config_converts_list_to_tuple():
    config = CompressionConfig(preferred_algorithms=["br"])
    assert config.preferred_algorithms == ("br",)


def test_policy_default():
    config = CompressionPolicy().config_for_content_type("text/html")
    assert config.preferred_algorithms == ("gzip", "deflate")
    assert config.min_size_to_compress == 1024


def test_policy_exact_match_wins():
    policy = CompressionPolicy()
    exact = CompressionConfig(enabled=False)
    wildcard = CompressionConfig(min_size_to_compress=10)
    policy.set_content_type_config("text/*", wildcard)
    policy.set_content_type_config("text/html", exact)
    assert policy.config_for_content_type("text/html") is exact
    assert policy.config_for_content_type("text/plain") is wildcard


def test_policy_falls_back_to_new_default():
    policy = CompressionPolicy()
    replacement = CompressionConfig(min_size_to_compress=1)
    policy.set_default_config(replacement)
    assert policy.config_for_content_type("image/png") is replacement
    assert policy.config_for_content_type("noslash") is replacement


def test_policies_do_not_share_state():
    first = CompressionPolicy()
    second = CompressionPolicy()
    custom = CompressionConfig(enabled=False)
    first.set_content_type_config("text/html", custom)
    assert second.config_for_content_type("text/html") is not custom
    assert second.config_for_content_type("text/html").enabled is True